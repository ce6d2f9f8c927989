"""Reads problem details from an activated problem page."""

from loguru import logger

from domain.models import ProblemDetails
from domain.parsers.problem_page import ProblemPageParser
from infrastructure.interfaces import BrowserSessionProtocol


class DetailExtractor:
    """Waits for the complexity block, then parses the rendered DOM."""

    def __init__(self, parser: ProblemPageParser | None = None, wait_timeout_ms: int = 5000):
        self.parser = parser or ProblemPageParser()
        self.wait_timeout_ms = wait_timeout_ms

    async def extract(self, session: BrowserSessionProtocol) -> ProblemDetails:
        container = self.parser.selectors.complexity_container
        if not await session.wait_for_selector(container, self.wait_timeout_ms):
            logger.debug(f"Complexity block did not appear within {self.wait_timeout_ms} ms")

        html = await session.content()
        details = self.parser.parse(html)

        logger.debug(
            f"Extracted details: time={details.time_complexity}, "
            f"space={details.space_complexity}, topics={len(details.topics)}"
        )
        return details
