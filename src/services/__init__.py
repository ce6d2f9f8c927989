from typing import TYPE_CHECKING, Optional

from services.link_resolver import LinkResolver
from services.metadata_store import MetadataStore

if TYPE_CHECKING:
    from application.orchestrator import ScrapeOrchestrator
    from config import Settings
    from infrastructure.interfaces import CacheClientProtocol


def create_orchestrator(
    settings: "Settings", cache_client: Optional["CacheClientProtocol"] = None
) -> "ScrapeOrchestrator":
    """Factory function to create the scrape orchestrator with all dependencies."""
    from application.orchestrator import ScrapeOrchestrator
    from domain.parsers.url_parser import IdentifierResolver
    from infrastructure.browser import BrowserSessionFactory, launch_playwright_session
    from infrastructure.scraping import DetailExtractor, DocumentRenderer, ElementLocator

    store = MetadataStore(cache_client, key_prefix=settings.cache_key_prefix)
    session_factory = BrowserSessionFactory(
        settings.browser,
        launcher=launch_playwright_session,
        max_concurrent_sessions=settings.max_concurrent_sessions,
    )
    link_resolver = LinkResolver(
        store=store,
        session_factory=session_factory,
        locator=ElementLocator(wait_timeout_ms=settings.locator_wait_ms),
        navigation_timeout_ms=settings.browser.navigation_timeout_ms,
        settle_timeout_ms=settings.settle_timeout_ms,
        write_back=settings.cache_links,
    )

    return ScrapeOrchestrator(
        store=store,
        session_factory=session_factory,
        link_resolver=link_resolver,
        extractor=DetailExtractor(wait_timeout_ms=settings.settle_timeout_ms),
        renderer=DocumentRenderer(navigation_timeout_ms=settings.render_navigation_timeout_ms),
        identifiers=IdentifierResolver(settings.identifier_source),
    )


__all__ = ["LinkResolver", "MetadataStore", "create_orchestrator"]
