import pytest

from scraper.interfaces.models import Preferences
from scraper.sources.realtor_scraper import PropertyRecommender
from scraper.sources.scraper_config import LISTING_SELECTORS
from scraper.utils.browser import BrowserSession
from tests.fakes import FakeCard, FakePage, FakePlaywrightFactory, make_card


def make_recommender(page, settings, fail=False):
    factory = FakePlaywrightFactory(page, fail=fail)
    session = BrowserSession(settings, playwright_factory=factory)
    return PropertyRecommender(session=session, settings=settings), factory


@pytest.mark.asyncio
async def test_scrape_properties_ranks_records(settings):
    cards = [
        make_card(price="$230,000", beds="4bd", address="B"),
        make_card(price="$225,000", beds="3bd", address="A"),
        make_card(price="$150,000", beds="2bd", address="C"),
    ]
    page = FakePage(cards=cards, visible=[LISTING_SELECTORS[2]])
    recommender, factory = make_recommender(page, settings)
    prefs = Preferences(location="Miami_FL", budget=250000, preferred_beds=3)

    result = await recommender.scrape_properties(prefs)

    assert result.success
    assert result.error is None
    assert result.total_found == 3
    assert [r.address for r in result.records] == ["A", "B"]
    assert result.records[0].score > result.records[1].score
    assert result.search_url.endswith("/sby-1")
    assert factory.browser.contexts[0].closed
    assert recommender.is_initialized


@pytest.mark.asyncio
async def test_listings_never_load(settings):
    page = FakePage(cards=[make_card()], visible=[])
    recommender, factory = make_recommender(page, settings)

    result = await recommender.scrape_properties(Preferences(location="Miami_FL"))

    assert not result.success
    assert result.records == []
    assert "failed to load" in result.error
    assert result.search_url.startswith("https://www.realtor.com/")
    assert factory.browser.contexts[0].closed


@pytest.mark.asyncio
async def test_zero_matched_elements(settings):
    page = FakePage(cards=[], visible=[LISTING_SELECTORS[0]])
    recommender, _ = make_recommender(page, settings)

    result = await recommender.scrape_properties(Preferences(location="Miami_FL"))

    assert not result.success
    assert result.error == "No properties found on the page"


@pytest.mark.asyncio
async def test_zero_valid_records(settings):
    page = FakePage(cards=[make_card(price=None), FakeCard(fail=True)], visible=[LISTING_SELECTORS[0]])
    recommender, factory = make_recommender(page, settings)

    result = await recommender.scrape_properties(Preferences(location="Miami_FL"))

    assert not result.success
    assert "No valid properties" in result.error
    assert factory.browser.contexts[0].closed


@pytest.mark.asyncio
async def test_navigation_timeout_becomes_failed_outcome(settings):
    page = FakePage(cards=[make_card()], visible=[LISTING_SELECTORS[0]], goto_timeouts=1)
    recommender, factory = make_recommender(page, settings)

    result = await recommender.scrape_properties(Preferences(location="Miami_FL"))

    assert not result.success
    assert "Timed out" in result.error
    assert factory.browser.contexts[0].closed
    assert not factory.browser.closed


@pytest.mark.asyncio
async def test_browser_launch_failure_becomes_failed_outcome(settings):
    recommender, _ = make_recommender(FakePage(), settings, fail=True)

    envelope = await recommender.get_recommendations(Preferences(location="Miami_FL"))

    assert not envelope.success
    assert "Failed to launch browser" in envelope.error
    assert envelope.recommendations == []
    assert not recommender.is_initialized


@pytest.mark.asyncio
async def test_recommendations_capped_at_ten(settings):
    cards = [make_card(price=f"${100000 + i * 1000:,}", address=str(i)) for i in range(15)]
    page = FakePage(cards=cards, visible=[LISTING_SELECTORS[0]])
    recommender, _ = make_recommender(page, settings)

    envelope = await recommender.get_recommendations(Preferences(location="Miami_FL", budget=200000))

    assert envelope.success
    assert envelope.total_found == 15
    assert len(envelope.recommendations) == 10
    # näher am Budget = besser
    assert envelope.recommendations[0].address == "14"

    data = envelope.to_dict()
    assert data["searchCriteria"] == {"location": "Miami_FL", "budget": 200000}
    assert {"priceNumeric", "bedsNumeric", "score", "id", "price"} <= set(data["recommendations"][0])
    assert "error" not in data


@pytest.mark.asyncio
async def test_session_shared_across_requests(settings):
    page = FakePage(cards=[make_card()], visible=[LISTING_SELECTORS[0]])
    recommender, factory = make_recommender(page, settings)
    prefs = Preferences(location="Miami_FL")

    await recommender.get_recommendations(prefs)
    await recommender.get_recommendations(prefs)

    assert factory.chromium.launches == 1
    assert len(factory.browser.contexts) == 2
    assert all(ctx.closed for ctx in factory.browser.contexts)

    await recommender.close()
    assert factory.browser.closed
    assert not recommender.is_initialized
