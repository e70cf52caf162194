# scraper/sources/scraper_config.py

from config import ACTIVE_CONFIG

SCRAPER_SETTINGS = {
    "SITE_ORIGIN": ACTIVE_CONFIG.SCRAPER["SITE_ORIGIN"],
    "BASE_URL": ACTIVE_CONFIG.SCRAPER["BASE_URL"],
    "HEADLESS": ACTIVE_CONFIG.SCRAPER["HEADLESS"],
    "TIMEOUT": ACTIVE_CONFIG.SCRAPER["NAV_TIMEOUT"],
    "WAIT_UNTIL": "networkidle",
    "SETTLE_MS": 3000,
    "SELECTOR_TIMEOUT": 5000,
    "RETRY_ATTEMPTS": ACTIVE_CONFIG.SCRAPER["NAV_RETRIES"],
    "WAIT_BETWEEN_RETRIES": 2,
    "MAX_PROPERTIES": ACTIVE_CONFIG.SCRAPER["MAX_PROPERTIES"],
    "TOP_K": ACTIVE_CONFIG.SCRAPER["TOP_K"],
    "VIEWPORT": {"width": 1366, "height": 768},
    "LOCALE": "en-US",
    "ACCEPT_LANGUAGE": "en-US,en;q=0.9",
    "USER_AGENT": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    ),
    "LAUNCH_ARGS": [
        "--no-sandbox",
        "--disable-setuid-sandbox",
        "--disable-dev-shm-usage",
        "--disable-web-security",
        "--disable-features=VizDisplayCompositor",
        "--disable-blink-features=AutomationControlled",
    ],
}

# Reihenfolge = Priorität; der erste Treffer wird für die Seite übernommen.
LISTING_SELECTORS = [
    '[data-testid="property-card"]',
    ".property-card",
    '[class*="property"]:not([class*="header"]):not([class*="nav"]):not([class*="footer"])',
    '[class*="PropertyCard"]',
    ".result-card",
]
