import re
from dataclasses import fields
from typing import Optional

from pipelines.feature_engineering import (
    make_record_id,
    parse_baths,
    parse_beds,
    parse_price,
    parse_sqft,
)
from scraper.interfaces.models import RawRecord, Record
from scraper.sources.scraper_config import SCRAPER_SETTINGS

_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*:")


def absolutize_url(url: Optional[str], origin: Optional[str] = None) -> Optional[str]:
    """
    '/realestateandhomes-detail/x' -> 'https://www.realtor.com/realestateandhomes-detail/x'
    '//cdn.example/img.jpg'        -> 'https://cdn.example/img.jpg'
    Absolute URLs bleiben unverändert.
    """
    if not url:
        return url
    if _SCHEME.match(url):
        return url
    if url.startswith("//"):
        return f"https:{url}"

    origin = (origin or SCRAPER_SETTINGS["SITE_ORIGIN"]).rstrip("/")
    if not url.startswith("/"):
        url = "/" + url
    return origin + url


def absolutize_image_url(url: Optional[str], origin: Optional[str] = None) -> Optional[str]:
    return absolutize_url(url, origin)


def normalize_record(raw: RawRecord) -> Record:
    """
    RawRecord (oder bereits normalisierter Record) -> Record.

    Alle Zahlen werden aus den Rohstrings abgeleitet, daher ist
    normalize_record(normalize_record(x)) == normalize_record(x).
    """
    base = {f.name: getattr(raw, f.name) for f in fields(RawRecord)}
    record = Record(**base)

    record.price_numeric = parse_price(raw.price)
    record.beds_numeric = parse_beds(raw.beds)
    record.baths_numeric = parse_baths(raw.baths)
    record.sqft_numeric = parse_sqft(raw.sqft)

    record.property_url = absolutize_url(raw.property_url)
    record.image_url = absolutize_image_url(raw.image_url)

    record.id = make_record_id(record.address, record.price_numeric, record.scraped_at)
    record.score = getattr(raw, "score", None)
    return record
