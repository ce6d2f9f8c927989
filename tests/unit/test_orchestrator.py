"""Unit tests for the scrape orchestrator."""

import pytest
from unittest.mock import AsyncMock

from application.orchestrator import ScrapeOrchestrator
from conftest import (
    PROBLEM_URL,
    SEARCH_URL,
    TWO_SUM_HTML,
    FakeCacheClient,
    FakeLauncher,
    FakeSession,
    make_factory,
)
from domain.exceptions import (
    ElementNotFoundError,
    InvalidURLError,
    LanguageUnavailableError,
    MissingInputError,
    RenderFailureError,
    ScrapeError,
)
from domain.models import PROBLEM_LINK_STRATEGY
from infrastructure.scraping import DetailExtractor, DocumentRenderer, ElementLocator, language_tab_selector
from services.link_resolver import LinkResolver
from services.metadata_store import MetadataStore

FIRST_STRATEGY = PROBLEM_LINK_STRATEGY[0].selector


def problem_page_session() -> FakeSession:
    return FakeSession(present={FIRST_STRATEGY}, html=TWO_SUM_HTML)


def make_orchestrator(launcher: FakeLauncher, cache_client=None) -> ScrapeOrchestrator:
    store = MetadataStore(cache_client)
    factory = make_factory(launcher)
    return ScrapeOrchestrator(
        store=store,
        session_factory=factory,
        link_resolver=LinkResolver(store=store, session_factory=factory, locator=ElementLocator()),
        extractor=DetailExtractor(),
        renderer=DocumentRenderer(),
    )


@pytest.mark.asyncio
async def test_two_sum_is_scraped_once_then_served_from_cache():
    cache = FakeCacheClient()
    launcher = FakeLauncher(problem_page_session)
    orchestrator = make_orchestrator(launcher, cache)

    first, first_source = await orchestrator.get_details(SEARCH_URL, "two-sum")
    second, second_source = await orchestrator.get_details(SEARCH_URL, "two-sum")

    assert first_source == "browser"
    assert second_source == "cache"
    assert launcher.launches == 1
    assert first == second
    assert second.time_complexity == "O(n)"
    assert second.space_complexity == "O(n)"
    assert second.company_names == ("Google",)
    assert second.topics == ("Array", "Hashing")
    assert second.link == PROBLEM_URL
    assert list(cache.data) == ["two-sum"]


@pytest.mark.asyncio
async def test_identifier_defaults_to_search_query():
    cache = FakeCacheClient()
    orchestrator = make_orchestrator(FakeLauncher(problem_page_session), cache)

    await orchestrator.get_details(SEARCH_URL)

    assert list(cache.data) == ["Two Sum"]


@pytest.mark.asyncio
async def test_locator_exhaustion_closes_session_exactly_once():
    cache = FakeCacheClient()
    launcher = FakeLauncher(lambda: FakeSession(html=TWO_SUM_HTML))
    orchestrator = make_orchestrator(launcher, cache)

    with pytest.raises(ElementNotFoundError):
        await orchestrator.get_details(SEARCH_URL, "two-sum")

    assert launcher.sessions[0].close_count == 1
    assert cache.data == {}


@pytest.mark.asyncio
async def test_store_failure_does_not_fail_the_request():
    launcher = FakeLauncher(problem_page_session)
    orchestrator = make_orchestrator(launcher, FakeCacheClient(fail=True))

    record, source = await orchestrator.get_details(SEARCH_URL, "two-sum")

    assert source == "browser"
    assert record.topics == ("Array", "Hashing")


@pytest.mark.asyncio
async def test_unexpected_extraction_error_is_wrapped_and_session_closed():
    launcher = FakeLauncher(problem_page_session)
    orchestrator = make_orchestrator(launcher)
    orchestrator.extractor.extract = AsyncMock(side_effect=KeyError("boom"))

    with pytest.raises(ScrapeError):
        await orchestrator.get_details(SEARCH_URL, "two-sum")

    assert launcher.sessions[0].close_count == 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "call",
    [
        lambda o: o.get_details(None, "two-sum"),
        lambda o: o.resolve_link("", "two-sum"),
        lambda o: o.render_document(None, "java"),
        lambda o: o.render_document(SEARCH_URL, None),
    ],
)
async def test_missing_input_is_rejected_before_launching(call):
    launcher = FakeLauncher(FakeSession)

    with pytest.raises(MissingInputError):
        await call(make_orchestrator(launcher))

    assert launcher.launches == 0


@pytest.mark.asyncio
async def test_render_language_unavailable_closes_session():
    launcher = FakeLauncher(lambda: FakeSession(present={language_tab_selector("python")}))
    orchestrator = make_orchestrator(launcher)

    with pytest.raises(LanguageUnavailableError):
        await orchestrator.render_document(SEARCH_URL, "java")

    session = launcher.sessions[0]
    assert session.close_count == 1
    assert session.called("add_style") == []


@pytest.mark.asyncio
async def test_render_capture_failure_becomes_render_failure():
    session = FakeSession(present={language_tab_selector("java")})
    session.render_pdf = AsyncMock(side_effect=RuntimeError("Target crashed"))
    launcher = FakeLauncher(lambda: session)
    orchestrator = make_orchestrator(launcher)

    with pytest.raises(RenderFailureError):
        await orchestrator.render_document(SEARCH_URL, "java")

    assert session.close_count == 1


@pytest.mark.asyncio
async def test_resolve_link_goes_through_resolver():
    launcher = FakeLauncher(problem_page_session)
    orchestrator = make_orchestrator(launcher)

    link = await orchestrator.resolve_link(SEARCH_URL, "two-sum")

    assert link == PROBLEM_URL
    assert launcher.sessions[0].close_count == 1


@pytest.mark.asyncio
async def test_details_are_read_from_page_reached_by_late_navigation():
    cache = FakeCacheClient()
    launcher = FakeLauncher(
        lambda: FakeSession(present={FIRST_STRATEGY}, html=TWO_SUM_HTML, navigation_delay=0.05)
    )
    orchestrator = make_orchestrator(launcher, cache)

    record, _ = await orchestrator.get_details(SEARCH_URL, "two-sum")

    assert record.link == PROBLEM_URL
    assert cache.data["two-sum"]["link"] == PROBLEM_URL


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "call",
    [
        lambda o: o.get_details("two sum", "two-sum"),
        lambda o: o.resolve_link("/search/?gq=Two%20Sum"),
        lambda o: o.render_document("two sum", "java"),
    ],
)
async def test_malformed_url_is_rejected_before_launching(call):
    launcher = FakeLauncher(FakeSession)

    with pytest.raises(InvalidURLError):
        await call(make_orchestrator(launcher))

    assert launcher.launches == 0
