"""Domain models package."""

from .document import PdfOptions, RenderedDocument
from .identifiers import IdentifierSource
from .locator import (
    PROBLEM_LINK_STRATEGY,
    ActivationResult,
    AttemptOutcome,
    LocatorAttempt,
    LocatorKind,
    LocatorStrategy,
)
from .problem import NOT_AVAILABLE, ProblemDetails, ProblemRecord, normalize_identifier

__all__ = [
    "NOT_AVAILABLE",
    "PROBLEM_LINK_STRATEGY",
    "ActivationResult",
    "AttemptOutcome",
    "IdentifierSource",
    "LocatorAttempt",
    "LocatorKind",
    "LocatorStrategy",
    "PdfOptions",
    "ProblemDetails",
    "ProblemRecord",
    "RenderedDocument",
    "normalize_identifier",
]
