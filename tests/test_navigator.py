import pytest

from scraper.errors.exceptions import (
    ListingsNotLoadedError,
    NavigationError,
    NoPropertiesFoundError,
)
from scraper.sources.realtor_navigator import find_listing_cards, navigate, wait_for_listings
from scraper.sources.scraper_config import LISTING_SELECTORS
from tests.fakes import FakePage, make_card


@pytest.mark.asyncio
async def test_navigate(settings):
    page = FakePage()
    await navigate(page, "https://www.realtor.com/x", settings)
    assert page.goto_calls == ["https://www.realtor.com/x"]


@pytest.mark.asyncio
async def test_navigation_timeout_is_fatal_without_retries(settings):
    page = FakePage(goto_timeouts=1)
    with pytest.raises(NavigationError):
        await navigate(page, "https://www.realtor.com/x", {**settings, "RETRY_ATTEMPTS": 0})
    assert len(page.goto_calls) == 1


@pytest.mark.asyncio
async def test_navigation_retries_are_bounded(settings):
    page = FakePage(goto_timeouts=1)
    await navigate(page, "https://www.realtor.com/x", {**settings, "RETRY_ATTEMPTS": 2})
    assert len(page.goto_calls) == 2

    page = FakePage(goto_timeouts=5)
    with pytest.raises(NavigationError):
        await navigate(page, "https://www.realtor.com/x", {**settings, "RETRY_ATTEMPTS": 2})
    assert len(page.goto_calls) == 3


@pytest.mark.asyncio
async def test_first_visible_selector_is_adopted():
    page = FakePage(visible=[LISTING_SELECTORS[1], LISTING_SELECTORS[3]])
    selector = await wait_for_listings(page, LISTING_SELECTORS, timeout=10)
    assert selector == LISTING_SELECTORS[1]
    assert page.waited_for == LISTING_SELECTORS[:2]


@pytest.mark.asyncio
async def test_no_selector_appears():
    page = FakePage()
    with pytest.raises(ListingsNotLoadedError, match="failed to load"):
        await wait_for_listings(page, LISTING_SELECTORS, timeout=10)
    assert page.waited_for == LISTING_SELECTORS


@pytest.mark.asyncio
async def test_zero_cards_is_fatal():
    page = FakePage(visible=[LISTING_SELECTORS[0]])
    with pytest.raises(NoPropertiesFoundError):
        await find_listing_cards(page, LISTING_SELECTORS[0])


@pytest.mark.asyncio
async def test_find_cards():
    page = FakePage(cards=[make_card(), make_card()], visible=[LISTING_SELECTORS[0]])
    assert len(await find_listing_cards(page, LISTING_SELECTORS[0])) == 2
