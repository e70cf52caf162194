# scraper/sources/realtor_query.py

from typing import Optional, Union

from scraper.interfaces.models import Preferences
from scraper.sources.scraper_config import SCRAPER_SETTINGS

Number = Union[int, float]

DEFAULT_LOCATION = "Miami_FL"
DEFAULT_PROPERTY_TYPE = "single-family-home"
DEFAULT_MIN_BEDS = 2
DEFAULT_MAX_BEDS = 4
DEFAULT_MIN_BATHS = 2
DEFAULT_MIN_PRICE = 150000
DEFAULT_MAX_PRICE = 250000
DEFAULT_SORT = 1  # 1 = newest


def _fmt(value: Number) -> str:
    """150000.0 -> '150000', 2.5 -> '2.5'"""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _pick(value: Optional[Number], default: Number) -> Number:
    return default if value is None else value


def _range_param(low: Number, high: Number) -> Optional[str]:
    # 0 zählt als "nicht gesetzt", die Seite kennt keine 0-Grenze
    if low and high:
        return f"{_fmt(low)}-{_fmt(high)}"
    if low or high:
        return _fmt(low or high)
    return None


def build_search_url(preferences: Preferences, base_url: Optional[str] = None) -> str:
    """
    Baut die realtor.com Such-URL:

    {base}{location}/type-{type}[/beds-..][/baths-..][/price-..]/sby-{sort}
    """
    base = base_url or SCRAPER_SETTINGS["BASE_URL"]

    location = preferences.location or DEFAULT_LOCATION
    property_type = preferences.property_type or DEFAULT_PROPERTY_TYPE
    min_beds = _pick(preferences.min_beds, DEFAULT_MIN_BEDS)
    max_beds = _pick(preferences.max_beds, DEFAULT_MAX_BEDS)
    min_baths = _pick(preferences.min_baths, DEFAULT_MIN_BATHS)
    min_price = _pick(preferences.min_price, DEFAULT_MIN_PRICE)
    max_price = _pick(preferences.max_price, DEFAULT_MAX_PRICE)
    sort_by = _pick(preferences.sort_by, DEFAULT_SORT)

    url = f"{base}{location}/type-{property_type}"

    beds = _range_param(min_beds, max_beds)
    if beds:
        url += f"/beds-{beds}"

    if min_baths:
        url += f"/baths-{_fmt(min_baths)}"

    price = _range_param(min_price, max_price)
    if price:
        url += f"/price-{price}"

    url += f"/sby-{sort_by}"

    return url
