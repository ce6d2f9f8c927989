"""Parser for problem pages of the problem-listing site."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from bs4 import BeautifulSoup, Tag
from loguru import logger

from domain.models import ProblemDetails


class PageVariant(str, Enum):
    """Layouts a problem page comes in."""

    # Page has a company section: label groups are [companies, topics].
    TAGGED = "tagged"
    # No company section: the first label group holds the topics.
    UNTAGGED = "untagged"


@dataclass(frozen=True)
class ExtractionSchema:
    """Which label group feeds which field for a page variant."""

    variant: PageVariant
    company_group: Optional[int]
    topic_group: int


SCHEMAS: dict[PageVariant, ExtractionSchema] = {
    PageVariant.TAGGED: ExtractionSchema(PageVariant.TAGGED, company_group=0, topic_group=1),
    PageVariant.UNTAGGED: ExtractionSchema(PageVariant.UNTAGGED, company_group=None, topic_group=0),
}


@dataclass(frozen=True)
class ProblemPageSelectors:
    """CSS selectors for the problem page."""

    complexity_container: str = '[class^="problems_expected_complexities_text"]'
    complexity_container_fallback: str = ".problems_expected_complexities_text"
    time_complexity: str = "div"
    space_complexity: str = "div:nth-child(2)"
    tags_marker: str = 'div[class*="problems_active_tags"]'
    label_group: str = ".ui.labels"
    label: str = "a"


DEFAULT_SELECTORS = ProblemPageSelectors()


@dataclass(frozen=True)
class ProblemPageSnapshot:
    """Raw facts read from a problem page."""

    time_complexity: Optional[str]
    space_complexity: Optional[str]
    has_tags_marker: bool
    label_groups: tuple[tuple[str, ...], ...]

    @property
    def variant(self) -> PageVariant:
        return PageVariant.TAGGED if self.has_tags_marker else PageVariant.UNTAGGED

    def group(self, index: Optional[int]) -> tuple[str, ...]:
        if index is None or index >= len(self.label_groups):
            return ()
        return self.label_groups[index]


class ProblemPageParser:
    """Reads complexity and label groups from problem page HTML."""

    def __init__(self, selectors: ProblemPageSelectors = DEFAULT_SELECTORS):
        self.selectors = selectors

    def parse(self, html: str) -> ProblemDetails:
        """Parse page HTML into problem details."""
        snapshot = self.snapshot(html)
        return self.apply_schema(snapshot)

    def snapshot(self, html: str) -> ProblemPageSnapshot:
        soup = BeautifulSoup(html, "lxml")
        time_complexity, space_complexity = self._extract_complexities(soup)

        return ProblemPageSnapshot(
            time_complexity=time_complexity,
            space_complexity=space_complexity,
            has_tags_marker=soup.select_one(self.selectors.tags_marker) is not None,
            label_groups=tuple(
                self._extract_labels(block) for block in soup.select(self.selectors.label_group)
            ),
        )

    @staticmethod
    def apply_schema(snapshot: ProblemPageSnapshot) -> ProblemDetails:
        schema = SCHEMAS[snapshot.variant]
        logger.debug(
            f"Problem page variant: {schema.variant.value}, "
            f"{len(snapshot.label_groups)} label group(s)"
        )

        company_names = (
            None if schema.company_group is None else snapshot.group(schema.company_group)
        )
        return ProblemDetails(
            time_complexity=snapshot.time_complexity,
            space_complexity=snapshot.space_complexity,
            company_names=company_names,
            topics=snapshot.group(schema.topic_group),
        )

    def _extract_complexities(self, soup: BeautifulSoup) -> tuple[Optional[str], Optional[str]]:
        container = soup.select_one(self.selectors.complexity_container) or soup.select_one(
            self.selectors.complexity_container_fallback
        )
        if container is None:
            return None, None

        return (
            _text_or_none(container.select_one(self.selectors.time_complexity)),
            _text_or_none(container.select_one(self.selectors.space_complexity)),
        )

    def _extract_labels(self, block: Tag) -> tuple[str, ...]:
        return tuple(link.get_text().strip() for link in block.select(self.selectors.label))


def _text_or_none(element: Optional[Tag]) -> Optional[str]:
    if element is None:
        return None
    return element.get_text().strip() or None
