# scraper/sources/realtor_navigator.py

import asyncio
from typing import Any, Dict, List, Optional, Sequence

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from scraper.errors.exceptions import (
    ListingsNotLoadedError,
    NavigationError,
    NoPropertiesFoundError,
)
from scraper.sources.scraper_config import LISTING_SELECTORS, SCRAPER_SETTINGS
from scraper.utils.log import get_logger

log = get_logger("navigator")


# ----------------------------------------------------------
# Navigation
# ----------------------------------------------------------
async def navigate(page, url: str, settings: Optional[Dict[str, Any]] = None) -> None:
    """
    Lädt die Suchseite und wartet kurz auf das clientseitige Rendering.

    Ein Timeout ist fatal (NavigationError). RETRY_ATTEMPTS zusätzliche
    Versuche sind möglich, Default ist 0.
    """
    settings = settings or SCRAPER_SETTINGS
    attempts = 1 + max(0, settings.get("RETRY_ATTEMPTS", 0))

    for attempt in range(1, attempts + 1):
        try:
            await page.goto(
                url,
                wait_until=settings["WAIT_UNTIL"],
                timeout=settings["TIMEOUT"],
            )
            break
        except PlaywrightTimeoutError as e:
            log.warning("Timeout loading %s (attempt %d/%d): %s", url, attempt, attempts, e)
            if attempt == attempts:
                raise NavigationError(
                    f"Timed out loading search page after {settings['TIMEOUT']}ms: {url}"
                ) from e
            await asyncio.sleep(settings.get("WAIT_BETWEEN_RETRIES", 0))

    await page.wait_for_timeout(settings["SETTLE_MS"])


# ----------------------------------------------------------
# Listing selector fallback chain
# ----------------------------------------------------------
async def wait_for_selector(page, selector: str, timeout: int) -> bool:
    try:
        await page.wait_for_selector(selector, timeout=timeout)
        return True
    except PlaywrightTimeoutError:
        log.debug("Element %s not found within %sms", selector, timeout)
        return False


async def wait_for_listings(
    page,
    selectors: Sequence[str] = LISTING_SELECTORS,
    timeout: Optional[int] = None,
) -> str:
    """Gibt den ersten Selektor zurück, der innerhalb seines Timeouts erscheint."""
    timeout = timeout or SCRAPER_SETTINGS["SELECTOR_TIMEOUT"]

    for selector in selectors:
        if await wait_for_selector(page, selector, timeout):
            return selector

    raise ListingsNotLoadedError(
        "Property listings failed to load - page might have changed structure"
    )


async def find_listing_cards(page, selector: str) -> List[Any]:
    cards = await page.query_selector_all(selector)
    log.info("Found %d property elements using selector: %s", len(cards), selector)

    if not cards:
        raise NoPropertiesFoundError("No properties found on the page")
    return cards
