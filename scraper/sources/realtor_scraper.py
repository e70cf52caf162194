# scraper/sources/realtor_scraper.py

from typing import Any, Dict, Optional

from pipelines.ranking import rank_records
from pipelines.raw_cleaning import normalize_record
from scraper.errors.exceptions import NoValidRecordsError
from scraper.interfaces.models import (
    Preferences,
    RecommendationEnvelope,
    ScrapeOutcome,
)
from scraper.sources.realtor_extractor import extract_records
from scraper.sources.realtor_navigator import (
    find_listing_cards,
    navigate,
    wait_for_listings,
)
from scraper.sources.realtor_query import build_search_url
from scraper.sources.scraper_config import LISTING_SELECTORS, SCRAPER_SETTINGS
from scraper.utils.browser import BrowserSession, open_page
from scraper.utils.log import Logger, _log, get_logger

log = get_logger("recommender")


class PropertyRecommender:
    """
    Preferences rein, gerankte Empfehlungen raus.

    Die BrowserSession wird von außen übergeben (bzw. einmal hier erzeugt)
    und über alle Requests geteilt; jeder Request bekommt seine eigene Seite.
    Kein Rate-Limiting, keine Warteschlange: das ist Sache des Aufrufers.
    """

    def __init__(
        self,
        session: Optional[BrowserSession] = None,
        settings: Optional[Dict[str, Any]] = None,
        weights: Optional[Dict[str, Any]] = None,
        logger: Optional[Logger] = None,
    ):
        self.settings = settings or SCRAPER_SETTINGS
        self.session = session or BrowserSession(self.settings)
        self.weights = weights
        self.logger = logger

    @property
    def is_initialized(self) -> bool:
        return self.session.is_initialized

    async def close(self) -> None:
        await self.session.release()

    # ------------------------------------------------------
    # Scrape + rank
    # ------------------------------------------------------
    async def scrape_properties(
        self,
        preferences: Preferences,
        max_properties: Optional[int] = None,
    ) -> ScrapeOutcome:
        search_url = build_search_url(preferences, self.settings["BASE_URL"])
        limit = max_properties if max_properties is not None else self.settings["MAX_PROPERTIES"]

        try:
            async with open_page(self.session, self.settings) as page:
                _log(self.logger, f"📄 Searching URL: {search_url}")
                await navigate(page, search_url, self.settings)

                selector = await wait_for_listings(
                    page, LISTING_SELECTORS, self.settings["SELECTOR_TIMEOUT"]
                )
                cards = await find_listing_cards(page, selector)

                raw_records = await extract_records(cards, limit)
                if not raw_records:
                    raise NoValidRecordsError(
                        f"No valid properties could be extracted from {len(cards)} listing cards"
                    )

            records = [normalize_record(r) for r in raw_records]
            ranked = rank_records(records, preferences, self.weights)
            _log(self.logger, f"📦 {len(records)} properties extracted, {len(ranked)} after filtering")

            return ScrapeOutcome(
                success=True,
                search_url=search_url,
                preferences=preferences,
                total_found=len(records),
                records=ranked,
            )

        except Exception as e:
            log.error("Scraping error for %s: %s", search_url, e)
            return ScrapeOutcome(
                success=False,
                search_url=search_url,
                preferences=preferences,
                error=str(e) or type(e).__name__,
            )

    # ------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------
    async def get_recommendations(self, preferences: Preferences) -> RecommendationEnvelope:
        result = await self.scrape_properties(preferences)

        if not result.success:
            return RecommendationEnvelope(
                success=False,
                preferences=preferences,
                search_url=result.search_url,
                error=result.error,
            )

        return RecommendationEnvelope(
            success=True,
            preferences=preferences,
            recommendations=result.records[: self.settings["TOP_K"]],
            total_found=result.total_found,
            search_url=result.search_url,
        )
