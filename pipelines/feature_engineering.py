import re
from datetime import datetime
from typing import Optional, Union


def _digits(value: Optional[str]) -> str:
    if not value:
        return ""
    return re.sub(r"[^\d]", "", str(value))


def parse_price(price_str: Optional[str]) -> Optional[int]:
    digits = _digits(price_str)
    return int(digits) if digits else None


def parse_beds(beds_str: Optional[str]) -> Optional[int]:
    digits = _digits(beds_str)
    return int(digits) if digits else None


def parse_sqft(sqft_str: Optional[str]) -> Optional[int]:
    digits = _digits(sqft_str)
    return int(digits) if digits else None


def parse_days_on_market(dom_str: Optional[str]) -> Optional[int]:
    digits = _digits(dom_str)
    return int(digits) if digits else None


def parse_baths(baths_str: Optional[str]) -> Optional[float]:
    """'2.5 ba' -> 2.5; bei '1.5.2' zählt die führende Dezimalzahl -> 1.5"""
    if not baths_str:
        return None
    s = re.sub(r"[^\d\.]", "", str(baths_str))
    m = re.match(r"\d+(?:\.\d*)?|\.\d+", s)
    return float(m.group(0)) if m else None


def make_record_id(
    address: Optional[str],
    price_numeric: Optional[Union[int, float]],
    scraped_at: datetime,
) -> str:
    # Zeitanteil aus dem Erfassungszeitpunkt -> eindeutig pro Run, stabil bei Re-Normalisierung
    stamp = int(scraped_at.timestamp() * 1_000_000)
    price_part = price_numeric if price_numeric is not None else "unknown"
    return f"{address or 'unknown'}_{price_part}_{stamp}"
