"""Problem metadata records and their hash-field encoding."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Optional

NOT_AVAILABLE = "N/A"


def normalize_identifier(identifier: Optional[str]) -> Optional[str]:
    """Collapse whitespace in a cache identifier; blank identifiers become None."""
    if identifier is None:
        return None
    normalized = " ".join(str(identifier).split())
    return normalized or None


def encode_sequence(values: Optional[tuple[str, ...]]) -> str:
    """Serialize a label sequence; ``None`` (not applicable) is kept as JSON null."""
    if values is None:
        return json.dumps(None)
    return json.dumps(list(values), ensure_ascii=False)


def decode_sequence(raw: Optional[str]) -> Optional[tuple[str, ...]]:
    """
    Decode a stored label sequence.

    Older entries may hold a bare scalar instead of a JSON list; such values
    decode as a single-element sequence rather than failing.
    """
    if raw is None or raw == "":
        return ()

    try:
        decoded = json.loads(raw)
    except (TypeError, ValueError):
        return (str(raw),)

    if decoded is None:
        return None
    if isinstance(decoded, list):
        return tuple(str(item) for item in decoded)
    return (str(decoded),)


@dataclass(frozen=True)
class ProblemDetails:
    """Fields read from a problem page, before normalization."""

    time_complexity: Optional[str] = None
    space_complexity: Optional[str] = None
    company_names: Optional[tuple[str, ...]] = None
    topics: tuple[str, ...] = ()


@dataclass(frozen=True)
class ProblemRecord:
    """
    Cached metadata for one problem.

    ``company_names`` is ``None`` when the page has no company section at all,
    which is distinct from an empty company section.
    """

    identifier: str
    time_complexity: str = NOT_AVAILABLE
    space_complexity: str = NOT_AVAILABLE
    company_names: Optional[tuple[str, ...]] = ()
    topics: tuple[str, ...] = field(default_factory=tuple)
    link: Optional[str] = None

    @classmethod
    def from_details(
        cls,
        identifier: str,
        details: ProblemDetails,
        link: Optional[str] = None,
    ) -> ProblemRecord:
        return cls(
            identifier=identifier,
            time_complexity=details.time_complexity or NOT_AVAILABLE,
            space_complexity=details.space_complexity or NOT_AVAILABLE,
            company_names=(
                None if details.company_names is None else tuple(details.company_names)
            ),
            topics=tuple(details.topics or ()),
            link=link,
        )

    def to_mapping(self) -> dict[str, str]:
        """Encode as a flat string mapping for a hash store."""
        mapping = {
            "time": self.time_complexity or NOT_AVAILABLE,
            "space": self.space_complexity or NOT_AVAILABLE,
            "companyNames": encode_sequence(self.company_names),
            "topics": encode_sequence(self.topics),
        }
        if self.link:
            mapping["link"] = self.link
        return mapping

    @classmethod
    def from_mapping(cls, identifier: str, mapping: dict[str, str]) -> ProblemRecord:
        """Decode a hash-store mapping; each field is decoded independently."""
        return cls(
            identifier=identifier,
            time_complexity=mapping.get("time") or NOT_AVAILABLE,
            space_complexity=mapping.get("space") or NOT_AVAILABLE,
            company_names=decode_sequence(mapping.get("companyNames")),
            topics=decode_sequence(mapping.get("topics")) or (),
            link=mapping.get("link") or None,
        )
