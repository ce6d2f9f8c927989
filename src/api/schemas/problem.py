"""Pydantic schemas for problem API endpoints."""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from domain.models import ProblemRecord


class ProblemRequest(BaseModel):
    """Request for problem metadata or the problem link."""

    url: Optional[str] = None
    identifier: Optional[str] = None


class ProblemDetailsResponse(BaseModel):
    """Metadata of a problem."""

    time_complexity: str = Field(serialization_alias="timeComplexity")
    space_complexity: str = Field(serialization_alias="spaceComplexity")
    # None when the page has no company section
    company_names: Optional[list[str]] = Field(default=None, serialization_alias="companyNames")
    topics: list[str]
    source: Literal["cache", "browser"]

    @classmethod
    def from_record(cls, record: ProblemRecord, source: str) -> "ProblemDetailsResponse":
        return cls(
            time_complexity=record.time_complexity,
            space_complexity=record.space_complexity,
            company_names=None if record.company_names is None else list(record.company_names),
            topics=list(record.topics),
            source=source,
        )


class ProblemLinkResponse(BaseModel):
    """Problem page URL behind a search result."""

    link: str


class DocumentRequest(BaseModel):
    """Request for a rendered article."""

    url: Optional[str] = None
    language: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str


class DocumentErrorResponse(BaseModel):
    success: bool = False
    error: str
