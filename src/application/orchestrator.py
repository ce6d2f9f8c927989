"""Async orchestrator for scraping and rendering problem pages."""

from typing import Literal, Optional

from loguru import logger

from domain.exceptions import (
    MissingInputError,
    ProblemScraperError,
    RenderFailureError,
    ScrapeError,
)
from domain.models import ProblemRecord, RenderedDocument
from domain.parsers.url_parser import IdentifierResolver, URLParser
from infrastructure.browser import BrowserSessionFactory
from infrastructure.scraping import DetailExtractor, DocumentRenderer
from services.link_resolver import LinkResolver
from services.metadata_store import MetadataStore

Source = Literal["cache", "browser"]


class ScrapeOrchestrator:
    """Composes the cache, the browser and the page scrapers for each request."""

    def __init__(
        self,
        *,
        store: MetadataStore,
        session_factory: BrowserSessionFactory,
        link_resolver: LinkResolver,
        extractor: DetailExtractor,
        renderer: DocumentRenderer,
        identifiers: Optional[IdentifierResolver] = None,
    ):
        """
        Initialize orchestrator with dependency injection.

        Args:
            store: Metadata store (cache-aside)
            session_factory: Launches one browser session per request
            link_resolver: Clicks through to the problem page
            extractor: Reads details from the problem page
            renderer: Renders article pages to PDF
            identifiers: Decides the cache key of a request
        """
        self.store = store
        self.session_factory = session_factory
        self.link_resolver = link_resolver
        self.extractor = extractor
        self.renderer = renderer
        self.identifiers = identifiers or IdentifierResolver()

    async def get_details(
        self, url: Optional[str], identifier: Optional[str] = None
    ) -> tuple[ProblemRecord, Source]:
        """Get problem metadata, from cache when possible."""
        if not url:
            raise MissingInputError("URL")
        URLParser.validate(url)

        key = self.identifiers.resolve(url, identifier)
        logger.info(f"Getting details for {url} (identifier={key})")

        cached = await self.store.get(key)
        if cached:
            return cached, "cache"

        try:
            async with self.session_factory.session() as session:
                link = await self.link_resolver.follow(session, url)
                details = await self.extractor.extract(session)
        except ProblemScraperError:
            raise
        except Exception as e:
            logger.error(f"Unexpected error while scraping {url}: {e}")
            raise ScrapeError(f"Failed to scrape {url}: {e}") from e

        record = ProblemRecord.from_details(key or "", details, link=link)
        await self.store.put(key, record)

        logger.info(f"Scraped details for {url}")
        return record, "browser"

    async def resolve_link(self, url: Optional[str], identifier: Optional[str] = None) -> str:
        """Get the problem page URL behind a search result."""
        if not url:
            raise MissingInputError("URL")
        URLParser.validate(url)

        key = self.identifiers.resolve(url, identifier)
        try:
            return await self.link_resolver.resolve(url, key)
        except ProblemScraperError:
            raise
        except Exception as e:
            logger.error(f"Unexpected error while resolving link for {url}: {e}")
            raise ScrapeError(f"Failed to resolve link for {url}: {e}") from e

    async def render_document(
        self, url: Optional[str], language: Optional[str]
    ) -> RenderedDocument:
        """Render the article at url as a PDF with code in the given language."""
        if not url:
            raise MissingInputError("URL")
        if not language:
            raise MissingInputError("language")
        URLParser.validate(url)

        logger.info(f"Rendering {url} in {language}")
        try:
            async with self.session_factory.session() as session:
                return await self.renderer.render(session, url, language)
        except ProblemScraperError:
            raise
        except Exception as e:
            logger.error(f"Unexpected error while rendering {url}: {e}")
            raise RenderFailureError(f"Failed to render {url}: {e}") from e
