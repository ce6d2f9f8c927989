"""Exceptions raised while scraping and rendering problem pages."""

from typing import Optional


class ProblemScraperError(Exception):
    """Base error for the problem scraper."""


class MissingInputError(ProblemScraperError):
    """A required request field is absent."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing {field}")


class InvalidURLError(ProblemScraperError, ValueError):
    """A request URL is not an absolute http(s) URL."""


class ScrapeError(ProblemScraperError):
    """Scraping a page failed."""


class ElementNotFoundError(ScrapeError):
    """Every locator strategy was exhausted without activating an element."""

    def __init__(self, url: str, attempts: int = 0):
        self.url = url
        self.attempts = attempts
        super().__init__(f"Problem link/button not found on {url} after {attempts} strategies")


class NavigationTimeoutError(ScrapeError):
    """Navigation did not settle within its timeout."""

    def __init__(self, url: str, timeout_ms: Optional[int] = None):
        self.url = url
        self.timeout_ms = timeout_ms
        super().__init__(f"Navigation to {url} timed out after {timeout_ms} ms")


class LanguageUnavailableError(ProblemScraperError):
    """The page has no code tab for the requested language."""

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"This note is not available in {language} language!")


class StoreUnavailableError(ProblemScraperError):
    """The key-value store could not be reached or returned an error."""


class RenderFailureError(ProblemScraperError):
    """Unexpected failure while preparing or capturing a document."""
