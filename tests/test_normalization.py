from datetime import datetime, timezone

import pytest

from pipelines.feature_engineering import (
    make_record_id,
    parse_baths,
    parse_beds,
    parse_days_on_market,
    parse_price,
    parse_sqft,
)
from pipelines.raw_cleaning import absolutize_image_url, absolutize_url, normalize_record
from scraper.interfaces.models import RawRecord

CAPTURED = datetime(2024, 5, 1, 12, 0, 0, 123456, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "raw,expected",
    [("$195,000", 195000), ("From $1,250,000+", 1250000), ("Contact for price", None), (None, None)],
)
def test_parse_price(raw, expected):
    assert parse_price(raw) == expected


def test_parse_beds_and_sqft():
    assert parse_beds("3 bd") == 3
    assert parse_beds("Studio") is None
    assert parse_sqft("1,850 sqft") == 1850
    assert parse_sqft("") is None


def test_parse_baths():
    assert parse_baths("2.5 ba") == 2.5
    assert parse_baths("2ba") == 2.0
    assert parse_baths("1.5.2") == 1.5
    assert parse_baths(".") is None
    assert parse_baths(None) is None


def test_parse_days_on_market():
    assert parse_days_on_market("12 days on realtor.com") == 12
    assert parse_days_on_market("New") is None


def test_absolutize_url():
    assert absolutize_url("/realestateandhomes-detail/x") == (
        "https://www.realtor.com/realestateandhomes-detail/x"
    )
    assert absolutize_url("https://example.com/a") == "https://example.com/a"
    assert absolutize_url("//ap.rdcpix.com/a.jpg") == "https://ap.rdcpix.com/a.jpg"
    assert absolutize_url(None) is None


def test_absolutize_image_url_relative_path():
    assert absolutize_image_url("img/a.jpg") == "https://www.realtor.com/img/a.jpg"


def test_record_id_uses_capture_time():
    rid = make_record_id("1 Main St", 195000, CAPTURED)
    assert rid.startswith("1 Main St_195000_")
    assert make_record_id(None, None, CAPTURED).startswith("unknown_unknown_")
    assert rid != make_record_id("1 Main St", 195000, datetime(2024, 5, 1, tzinfo=timezone.utc))


def test_normalize_record():
    raw = RawRecord(
        price="$195,000",
        address="1 Main St",
        beds="3bd",
        baths="2.5ba",
        sqft="1,500 sqft",
        property_url="/realestateandhomes-detail/1-Main-St",
        image_url="//ap.rdcpix.com/a.jpg",
        scraped_at=CAPTURED,
    )
    rec = normalize_record(raw)

    assert rec.price_numeric == 195000
    assert rec.beds_numeric == 3
    assert rec.baths_numeric == 2.5
    assert rec.sqft_numeric == 1500
    assert rec.property_url == "https://www.realtor.com/realestateandhomes-detail/1-Main-St"
    assert rec.image_url == "https://ap.rdcpix.com/a.jpg"
    assert rec.price == "$195,000"
    assert rec.score is None
    # Rohdaten bleiben unverändert
    assert raw.property_url == "/realestateandhomes-detail/1-Main-St"


def test_unparseable_fields_are_absent_not_zero():
    rec = normalize_record(RawRecord(price="$200,000", beds="Studio", baths="--", scraped_at=CAPTURED))
    assert rec.beds_numeric is None
    assert rec.baths_numeric is None
    assert rec.sqft_numeric is None


@pytest.mark.parametrize(
    "raw",
    [
        RawRecord(price="$195,000", address="1 Main St", beds="3bd", baths="2ba", scraped_at=CAPTURED),
        RawRecord(price="Contact", property_url="detail/abc", image_url="https://x/y.jpg", scraped_at=CAPTURED),
        RawRecord(scraped_at=CAPTURED),
    ],
)
def test_normalize_is_idempotent(raw):
    once = normalize_record(raw)
    assert normalize_record(once) == once
