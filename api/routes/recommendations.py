# api/routes/recommendations.py
import time
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic.alias_generators import to_camel

from api.models import ApiResponse, RecommendationRequest
from scraper.interfaces.models import NUMERIC_FIELDS
from scraper.sources.realtor_scraper import PropertyRecommender
from scraper.utils.log import get_logger

log = get_logger("api")

router = APIRouter(tags=["recommendations"])

_NUMERIC_ALIASES = {f: to_camel(f) for f in NUMERIC_FIELDS}
_NUMERIC_ALIASES.update({alias: alias for alias in list(_NUMERIC_ALIASES.values())})


def get_recommender(request: Request) -> PropertyRecommender:
    return request.app.state.recommender


def _error(status_code: int, error: str, message: Optional[str] = None) -> JSONResponse:
    body = ApiResponse(success=False, error=error, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def validation_message(errors: List[Dict[str, Any]]) -> str:
    """Erste pydantic-Fehlermeldung -> kurze, nutzerlesbare Meldung."""
    if not errors:
        return "Invalid request"

    err = errors[0]
    if err.get("type") == "json_invalid":
        return "Request body must be valid JSON"

    loc = [p for p in err.get("loc", ()) if p != "body"]
    if not loc:
        if err.get("type") == "missing":
            return "Request body is required"
        return "Request body must be a JSON object"

    field = str(loc[0])
    if field == "location":
        return "Location is required"
    if field in ("propertyType", "property_type"):
        return "Invalid property type"
    if field in ("sortBy", "sort_by"):
        return "Sort option must be between 1 and 5"
    if field in _NUMERIC_ALIASES:
        return f"{_NUMERIC_ALIASES[field]} must be a positive number"
    return f"Invalid value for {field}"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error(400, validation_message(exc.errors()))


@router.post("/recommendations")
async def recommendations(
    payload: RecommendationRequest,
    recommender: PropertyRecommender = Depends(get_recommender),
):
    start = time.perf_counter()
    preferences = payload.to_preferences()
    log.info("Getting recommendations for: %s", preferences.to_dict())

    try:
        result = await recommender.get_recommendations(preferences)
    except Exception as e:
        log.exception("API error")
        return _error(500, "Internal server error", str(e))

    if not result.success:
        return _error(500, "Failed to get recommendations", result.error)

    processing_time = int((time.perf_counter() - start) * 1000)
    log.info("Recommendations processed in %dms", processing_time)

    data = {**result.to_dict(), "processingTime": processing_time}
    return ApiResponse(success=True, data=data).model_dump(exclude_none=True)
