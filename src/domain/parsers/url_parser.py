"""Parser for problem-listing search URLs and cache identifiers."""

from typing import Optional
from urllib.parse import parse_qs, urlparse

from loguru import logger

from domain.exceptions import InvalidURLError
from domain.models import IdentifierSource, normalize_identifier


class URLParser:
    """Parser for search result URLs, e.g. ``https://www.geeksforgeeks.org/search/?gq=Two%20Sum``."""

    SEARCH_QUERY_PARAM = "gq"

    @classmethod
    def validate(cls, url: str) -> str:
        """Ensure the URL is absolute http(s)."""
        try:
            parsed = urlparse(url)
        except Exception as e:
            raise InvalidURLError(f"Failed to parse URL: {url}") from e

        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise InvalidURLError(f"Invalid URL format: {url}")
        return url

    @classmethod
    def extract_search_query(cls, url: Optional[str]) -> Optional[str]:
        """Return the decoded search query of the URL, or None if it has none."""
        if not url:
            return None

        try:
            query = parse_qs(urlparse(url).query).get(cls.SEARCH_QUERY_PARAM)
        except Exception:
            logger.debug(f"Could not read search query from URL: {url}")
            return None

        if not query:
            return None
        return normalize_identifier(query[0])


class IdentifierResolver:
    """
    Decides the cache key of a request.

    Caller-supplied identifiers are not checked against the URL, so a caller
    can point any identifier at any page. ``IdentifierSource.URL`` closes that
    gap by ignoring caller identifiers altogether.
    """

    def __init__(self, source: IdentifierSource = IdentifierSource.REQUEST):
        self.source = source

    def resolve(self, url: Optional[str], identifier: Optional[str] = None) -> Optional[str]:
        if self.source is IdentifierSource.REQUEST:
            supplied = normalize_identifier(identifier)
            if supplied:
                return supplied

        derived = URLParser.extract_search_query(url)
        logger.debug(f"Identifier derived from URL: {derived}")
        return derived
