import pytest

from scraper.sources.scraper_config import SCRAPER_SETTINGS


@pytest.fixture
def settings():
    return {**SCRAPER_SETTINGS, "SETTLE_MS": 0, "SELECTOR_TIMEOUT": 10, "WAIT_BETWEEN_RETRIES": 0}
