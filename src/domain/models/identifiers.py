"""Value objects for cache identifiers."""

from enum import Enum


class IdentifierSource(str, Enum):
    """Where the cache key of a request comes from."""

    # Caller-supplied identifier, falling back to the URL search query.
    REQUEST = "request"
    # Only the search query of the URL; caller identifiers are ignored.
    URL = "url"
