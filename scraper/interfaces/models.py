from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt
from pydantic.alias_generators import to_camel

PropertyType = Literal[
    "single-family-home",
    "condo",
    "townhome",
    "multi-family",
    "manufactured",
    "land",
    "farm",
]

# int bleibt int (für die URL), bool und Strings werden abgelehnt
NonNegative = Union[
    Annotated[StrictInt, Field(ge=0)],
    Annotated[StrictFloat, Field(ge=0)],
]

NUMERIC_FIELDS = (
    "min_beds",
    "max_beds",
    "min_baths",
    "max_baths",
    "min_price",
    "max_price",
    "budget",
    "preferred_beds",
    "preferred_baths",
    "min_sqft",
    "max_sqft",
    "max_days_on_market",
)


class Preferences(BaseModel):
    """
    Suchpräferenzen eines Nutzers.

    Alle Zahlenfelder sind optional; None heißt "keine Einschränkung".
    JSON-Keys sind camelCase (minBeds, sortBy, ...), snake_case geht auch.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    location: Optional[str] = None
    property_type: Optional[PropertyType] = None
    min_beds: Optional[NonNegative] = None
    max_beds: Optional[NonNegative] = None
    min_baths: Optional[NonNegative] = None
    max_baths: Optional[NonNegative] = None
    min_price: Optional[NonNegative] = None
    max_price: Optional[NonNegative] = None
    budget: Optional[NonNegative] = None
    preferred_beds: Optional[NonNegative] = None
    preferred_baths: Optional[NonNegative] = None
    min_sqft: Optional[NonNegative] = None
    max_sqft: Optional[NonNegative] = None
    max_days_on_market: Optional[NonNegative] = None
    sort_by: Optional[StrictInt] = Field(None, ge=1, le=5)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


@dataclass
class RawRecord:
    price: Optional[str] = None
    address: Optional[str] = None
    beds: Optional[str] = None
    baths: Optional[str] = None
    sqft: Optional[str] = None
    lot_size: Optional[str] = None
    image_url: Optional[str] = None
    property_url: Optional[str] = None
    property_type: Optional[str] = None
    days_on_market: Optional[str] = None
    mls_id: Optional[str] = None
    scraped_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class Record(RawRecord):
    price_numeric: Optional[int] = None
    beds_numeric: Optional[int] = None
    baths_numeric: Optional[float] = None
    sqft_numeric: Optional[int] = None
    id: Optional[str] = None
    score: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, datetime):
                value = value.isoformat()
            out[to_camel(f.name)] = value
        return out


@dataclass
class CardResult:
    """Ergebnis pro Listing-Karte: entweder record oder error."""

    index: int
    record: Optional[RawRecord] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ScrapeOutcome:
    success: bool
    search_url: str
    preferences: Preferences
    total_found: int = 0
    records: List[Record] = field(default_factory=list)
    error: Optional[str] = None

    def __post_init__(self):
        if self.success and self.error is not None:
            raise ValueError("successful outcome cannot carry an error")
        if not self.success and self.records:
            raise ValueError("failed outcome cannot carry records")


@dataclass
class RecommendationEnvelope:
    success: bool
    preferences: Preferences
    recommendations: List[Record] = field(default_factory=list)
    total_found: Optional[int] = None
    search_url: Optional[str] = None
    generated_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "success": self.success,
            "recommendations": [r.to_dict() for r in self.recommendations],
            "totalFound": self.total_found,
            "searchCriteria": self.preferences.to_dict(),
            "searchUrl": self.search_url,
            "generatedAt": self.generated_at,
        }
        if self.error is not None:
            data["error"] = self.error
        return data
