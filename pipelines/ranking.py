"""
Filter & Ranking für normalisierte Records.

Harte Filter werfen Records komplett raus; nur die Überlebenden werden
bewertet. Der Score ist eine Summe unabhängiger, gewichteter Terme und
wird am Ende auf >= 0 geklemmt.
"""

from dataclasses import replace
from typing import Any, Dict, List, Optional

from config import ACTIVE_CONFIG
from pipelines.feature_engineering import parse_days_on_market
from scraper.interfaces.models import Preferences, Record


def _weights(weights: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    return {**ACTIVE_CONFIG.RANKING, **(weights or {})}


# ----------------------------------------------------------
# Filters
# ----------------------------------------------------------
def passes_filters(record: Record, prefs: Preferences) -> bool:
    price = record.price_numeric
    if price is None:
        return False
    # 0 zählt als nicht gesetzt (wie in build_search_url)
    if prefs.budget and price > prefs.budget:
        return False

    if (
        prefs.preferred_beds
        and record.beds_numeric is not None
        and record.beds_numeric < prefs.preferred_beds
    ):
        return False

    if (
        prefs.preferred_baths
        and record.baths_numeric is not None
        and record.baths_numeric < prefs.preferred_baths
    ):
        return False

    area = record.sqft_numeric
    if area is not None:
        if prefs.min_sqft and area < prefs.min_sqft:
            return False
        if prefs.max_sqft and area > prefs.max_sqft:
            return False

    if prefs.max_days_on_market:
        dom = parse_days_on_market(record.days_on_market)
        if dom is not None and dom > prefs.max_days_on_market:
            return False

    return True


def filter_records(records: List[Record], prefs: Preferences) -> List[Record]:
    return [r for r in records if passes_filters(r, prefs)]


# ----------------------------------------------------------
# Scoring
# ----------------------------------------------------------
def price_term(record: Record, prefs: Preferences, weights: Optional[Dict[str, Any]] = None) -> float:
    w = _weights(weights)
    if not prefs.budget or record.price_numeric is None:
        return 0.0

    ratio = record.price_numeric / prefs.budget
    if ratio <= 1:
        return (1 - abs(1 - ratio)) * w["PRICE_WEIGHT"]
    # über Budget: Strafe statt 0
    return -(ratio - 1) * w["OVER_BUDGET_PENALTY"]


def recency_term(record: Record, weights: Optional[Dict[str, Any]] = None) -> float:
    w = _weights(weights)
    dom = parse_days_on_market(record.days_on_market)
    if dom is None:
        return 0.0
    return max(0.0, w["RECENCY_MAX"] - dom / w["RECENCY_DIVISOR"])


def space_term(record: Record, prefs: Preferences, weights: Optional[Dict[str, Any]] = None) -> float:
    w = _weights(weights)
    if not prefs.min_sqft or record.sqft_numeric is None:
        return 0.0
    extra = max(0, record.sqft_numeric - prefs.min_sqft)
    return min(w["SPACE_MAX"], extra / w["SPACE_DIVISOR"])


def beds_term(record: Record, prefs: Preferences, weights: Optional[Dict[str, Any]] = None) -> float:
    w = _weights(weights)
    if not prefs.preferred_beds or record.beds_numeric is None:
        return 0.0
    if record.beds_numeric == prefs.preferred_beds:
        return w["BEDS_EXACT_BONUS"]  # perfect match
    if record.beds_numeric > prefs.preferred_beds:
        return w["BEDS_ABOVE_BONUS"]
    return 0.0


def baths_term(record: Record, prefs: Preferences, weights: Optional[Dict[str, Any]] = None) -> float:
    w = _weights(weights)
    if not prefs.preferred_baths or record.baths_numeric is None:
        return 0.0
    return w["BATHS_BONUS"] if record.baths_numeric >= prefs.preferred_baths else 0.0


def score_record(record: Record, prefs: Preferences, weights: Optional[Dict[str, Any]] = None) -> float:
    score = (
        price_term(record, prefs, weights)
        + recency_term(record, weights)
        + space_term(record, prefs, weights)
        + beds_term(record, prefs, weights)
        + baths_term(record, prefs, weights)
    )
    return max(0.0, score)


def rank_records(
    records: List[Record],
    prefs: Preferences,
    weights: Optional[Dict[str, Any]] = None,
    top_k: Optional[int] = None,
) -> List[Record]:
    """
    Filtern, bewerten, absteigend sortieren (stabil), optional auf top_k kürzen.
    Die Eingabe-Records werden nicht verändert.
    """
    scored = [
        replace(r, score=score_record(r, prefs, weights))
        for r in filter_records(records, prefs)
    ]
    ranked = sorted(scored, key=lambda r: r.score, reverse=True)
    if top_k is not None:
        ranked = ranked[:top_k]
    return ranked
