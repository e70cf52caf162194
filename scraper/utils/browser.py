import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Callable, Dict, Optional

from playwright.async_api import async_playwright

from scraper.errors.exceptions import BrowserLaunchError
from scraper.sources.scraper_config import SCRAPER_SETTINGS
from scraper.utils.log import get_logger

log = get_logger("browser")

# Basic anti-bot hardening
STEALTH_SCRIPT = """
Object.defineProperty(navigator, 'webdriver', { get: () => undefined });
Object.defineProperty(navigator, 'languages', { get: () => ['en-US', 'en'] });
Object.defineProperty(navigator, 'plugins', { get: () => [1, 2, 3, 4, 5] });
"""


class BrowserSession:
    """
    Geteilte Chromium-Instanz für alle Requests.

    acquire() startet den Browser beim ersten Aufruf und liefert danach
    immer dieselbe Instanz; release() schließt ihn und setzt den Zustand
    zurück, so dass der nächste acquire() sauber neu startet.
    """

    def __init__(
        self,
        settings: Optional[Dict[str, Any]] = None,
        playwright_factory: Callable[[], Any] = async_playwright,
    ):
        self.settings = settings or SCRAPER_SETTINGS
        self._playwright_factory = playwright_factory
        self._pw = None
        self._browser = None
        self._lock = asyncio.Lock()

    @property
    def is_initialized(self) -> bool:
        return self._browser is not None

    async def acquire(self):
        async with self._lock:
            if self._browser is not None:
                return self._browser

            pw = None
            try:
                pw = await self._playwright_factory().start()
                browser = await pw.chromium.launch(
                    headless=self.settings["HEADLESS"],
                    args=self.settings["LAUNCH_ARGS"],
                )
            except Exception as e:
                if pw is not None:
                    await pw.stop()
                raise BrowserLaunchError(f"Failed to launch browser: {e}") from e

            self._pw = pw
            self._browser = browser
            log.info("Browser launched (headless=%s)", self.settings["HEADLESS"])
            return browser

    async def release(self) -> None:
        async with self._lock:
            browser, pw = self._browser, self._pw
            self._browser = None
            self._pw = None

            try:
                if browser is not None:
                    await browser.close()
            finally:
                if pw is not None:
                    await pw.stop()

            if browser is not None:
                log.info("Browser closed")


@asynccontextmanager
async def open_page(
    session: BrowserSession,
    settings: Optional[Dict[str, Any]] = None,
) -> AsyncIterator[Any]:
    """
    Eigener Browser-Context pro Request.

    Der Context (und damit die Seite) wird auf jedem Exit-Pfad geschlossen,
    der geteilte Browser bleibt offen.
    """
    settings = settings or session.settings
    browser = await session.acquire()

    context = await browser.new_context(
        viewport=settings["VIEWPORT"],
        locale=settings["LOCALE"],
        user_agent=settings["USER_AGENT"],
        extra_http_headers={"Accept-Language": settings["ACCEPT_LANGUAGE"]},
        java_script_enabled=True,
    )
    try:
        await context.add_init_script(STEALTH_SCRIPT)
        page = await context.new_page()
        yield page
    finally:
        await context.close()
