class ScraperError(Exception):
    """Base class for scraper exceptions."""
    pass


class BrowserLaunchError(ScraperError):
    """Raised when the headless browser cannot be started."""
    pass


class ExtractionError(ScraperError):
    """Raised when extraction fails."""
    pass


class NetworkError(ScraperError):
    """Raised when network or page loading fails."""
    pass


class NavigationError(NetworkError):
    """Raised when the search page does not load within its timeout."""
    pass


class ListingsNotLoadedError(ExtractionError):
    """None of the listing-card selectors appeared on the page."""
    pass


class NoPropertiesFoundError(ExtractionError):
    """The adopted listing selector matched zero elements."""
    pass


class NoValidRecordsError(ExtractionError):
    """Cards were found but none yielded a usable record."""
    pass
