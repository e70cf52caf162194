from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from scraper.interfaces.models import Preferences


class RecommendationRequest(Preferences):
    location: str = Field(..., min_length=1)

    def to_preferences(self) -> Preferences:
        return Preferences(**self.model_dump())


class ApiResponse(BaseModel):
    success: bool
    data: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    message: Optional[str] = None
