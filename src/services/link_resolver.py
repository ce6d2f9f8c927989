"""Follows the problem link of a search result page."""

from collections.abc import Sequence
from dataclasses import replace
from typing import Optional

from loguru import logger

from domain.exceptions import ElementNotFoundError
from domain.models import PROBLEM_LINK_STRATEGY, LocatorStrategy
from infrastructure.browser import BrowserSessionFactory
from infrastructure.interfaces import BrowserSessionProtocol
from infrastructure.scraping import ElementLocator
from services.metadata_store import MetadataStore


class LinkResolver:
    """Clicks through to the problem page and reports where it landed."""

    def __init__(
        self,
        *,
        store: MetadataStore,
        session_factory: BrowserSessionFactory,
        locator: ElementLocator,
        strategies: Sequence[LocatorStrategy] = PROBLEM_LINK_STRATEGY,
        navigation_timeout_ms: int = 60_000,
        settle_timeout_ms: int = 5000,
        write_back: bool = False,
    ):
        """
        Initialize resolver.

        Args:
            store: Metadata store consulted before opening a browser
            session_factory: Source of browser sessions
            locator: Element locator used to click the problem link
            strategies: Ordered locator strategies for the problem link
            navigation_timeout_ms: Timeout for loading the search page
            settle_timeout_ms: Best-effort wait for the click's navigation
            write_back: Store resolved links into already-cached records
        """
        self.store = store
        self.session_factory = session_factory
        self.locator = locator
        self.strategies = tuple(strategies)
        self.navigation_timeout_ms = navigation_timeout_ms
        self.settle_timeout_ms = settle_timeout_ms
        self.write_back = write_back

    async def resolve(self, url: str, identifier: Optional[str] = None) -> str:
        """Return the problem page URL, from cache when a record has one."""
        cached = await self.store.get(identifier)
        if cached and cached.link:
            logger.info(f"Using cached link for: {identifier}")
            return cached.link

        async with self.session_factory.session() as session:
            link = await self.follow(session, url)

        if self.write_back:
            await self._remember(identifier, link)
        return link

    async def follow(self, session: BrowserSessionProtocol, url: str) -> str:
        """Open url in session, click the problem link, and return the new URL."""
        await session.navigate(url, wait_until="domcontentloaded", timeout_ms=self.navigation_timeout_ms)

        search_url = session.url
        result = await self.locator.run(self.strategies, session)
        if not result.activated:
            raise ElementNotFoundError(url, attempts=len(result.attempts))

        if not await session.wait_for_url_change(
            search_url, "domcontentloaded", self.settle_timeout_ms
        ):
            logger.warning(f"Page did not leave {search_url} after activation")

        logger.debug(f"Problem link resolved to {session.url}")
        return session.url

    async def _remember(self, identifier: Optional[str], link: str) -> None:
        # Only existing records are updated so a link alone never reads as cached metadata.
        cached = await self.store.get(identifier)
        if cached is None:
            return
        await self.store.put(identifier, replace(cached, link=link))
