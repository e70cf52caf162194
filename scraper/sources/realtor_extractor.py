# scraper/sources/realtor_extractor.py

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from pipelines.feature_engineering import parse_price
from scraper.interfaces.models import CardResult, RawRecord
from scraper.sources.scraper_config import SCRAPER_SETTINGS
from scraper.utils.log import get_logger

log = get_logger("extractor")


# ----------------------------------------------------------
# Field strategies
# ----------------------------------------------------------
class FieldStrategy:
    """Versucht, aus einer Listing-Karte einen String zu holen."""

    selector: str

    async def attempt(self, card) -> Optional[str]:
        raise NotImplementedError


class TextStrategy(FieldStrategy):
    def __init__(self, selector: str):
        self.selector = selector

    async def attempt(self, card) -> Optional[str]:
        el = await card.query_selector(self.selector)
        if el is None:
            return None
        txt = await el.text_content()
        return txt.strip() if txt and txt.strip() else None

    def __repr__(self):
        return f"TextStrategy({self.selector!r})"


class AttributeStrategy(FieldStrategy):
    def __init__(self, selector: str, attribute: str):
        self.selector = selector
        self.attribute = attribute

    async def attempt(self, card) -> Optional[str]:
        el = await card.query_selector(self.selector)
        if el is None:
            return None
        value = await el.get_attribute(self.attribute)
        return value.strip() if value and value.strip() else None

    def __repr__(self):
        return f"AttributeStrategy({self.selector!r}, {self.attribute!r})"


def _texts(*selectors: str) -> List[FieldStrategy]:
    return [TextStrategy(s) for s in selectors]


def _attrs(attribute: str, *selectors: str) -> List[FieldStrategy]:
    return [AttributeStrategy(s, attribute) for s in selectors]


# Pro Feld: Reihenfolge = Priorität
FIELD_STRATEGIES: Dict[str, List[FieldStrategy]] = {
    "price": _texts(
        '[data-testid="property-price"]', ".price", '[class*="price"]', '[class*="Price"]'
    ),
    "address": _texts(
        '[data-testid="property-address"]', ".address", '[class*="address"]', '[class*="Address"]'
    ),
    "beds": _texts('[data-testid="property-bed"]', '[class*="bed"]', '[class*="Bed"]'),
    "baths": _texts('[data-testid="property-bath"]', '[class*="bath"]', '[class*="Bath"]'),
    "sqft": _texts('[data-testid="property-sqft"]', '[class*="sqft"]', '[class*="Sqft"]'),
    "lot_size": _texts('[data-testid="property-lot-size"]', '[class*="lot"]', '[class*="Lot"]'),
    "image_url": _attrs("src", "img", '[class*="photo"] img', '[class*="Photo"] img'),
    "property_url": _attrs(
        "href", 'a[href*="/realestateandhomes-detail/"]', 'a[href*="/property-detail/"]'
    ),
    "property_type": _texts(
        '[data-testid="property-type"]', '[class*="property-type"]', '[class*="PropertyType"]'
    ),
    "days_on_market": _texts('[class*="days-on-market"]', '[class*="dom"]', '[class*="DOM"]'),
    "mls_id": _texts('[class*="mls"]', '[class*="MLS"]'),
}


async def extract_field(card, strategies: Sequence[FieldStrategy]) -> Optional[str]:
    for strategy in strategies:
        value = await strategy.attempt(card)
        if value:
            return value
    return None


# ----------------------------------------------------------
# Cards
# ----------------------------------------------------------
async def extract_card(
    card,
    index: int,
    strategies: Optional[Dict[str, Sequence[FieldStrategy]]] = None,
) -> CardResult:
    strategies = strategies or FIELD_STRATEGIES
    try:
        values = {}
        for name, chain in strategies.items():
            values[name] = await extract_field(card, chain)
        record = RawRecord(**values, scraped_at=datetime.now(timezone.utc))
        return CardResult(index=index, record=record)
    except Exception as e:
        return CardResult(index=index, error=e)


async def extract_records(
    cards: Sequence[Any],
    max_properties: Optional[int] = None,
    strategies: Optional[Dict[str, Sequence[FieldStrategy]]] = None,
) -> List[RawRecord]:
    """
    Liest bis zu max_properties Karten aus.

    Fehler einer Karte brechen den Batch nicht ab; Karten ohne
    verwertbaren Preis werden verworfen.
    """
    limit = max_properties if max_properties is not None else SCRAPER_SETTINGS["MAX_PROPERTIES"]

    records: List[RawRecord] = []
    for i, card in enumerate(cards[:limit]):
        result = await extract_card(card, i, strategies)
        if not result.ok:
            log.warning("Error processing property %d: %s", result.index, result.error)
            continue
        if parse_price(result.record.price) is None:
            log.debug("Skipping property %d: no price", result.index)
            continue
        records.append(result.record)

    log.info("Successfully extracted %d valid properties", len(records))
    return records
