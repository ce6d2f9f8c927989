"""Unit tests for problem link resolution."""

import pytest

from conftest import PROBLEM_URL, SEARCH_URL, FakeCacheClient, FakeLauncher, FakeSession, make_factory
from domain.exceptions import ElementNotFoundError
from domain.models import PROBLEM_LINK_STRATEGY, ProblemRecord
from infrastructure.scraping import ElementLocator
from services.link_resolver import LinkResolver
from services.metadata_store import MetadataStore

SECOND_STRATEGY = PROBLEM_LINK_STRATEGY[1].selector


def make_resolver(launcher, cache_client=None, write_back=False):
    return LinkResolver(
        store=MetadataStore(cache_client),
        session_factory=make_factory(launcher),
        locator=ElementLocator(),
        write_back=write_back,
    )


@pytest.mark.asyncio
async def test_resolve_clicks_through_and_returns_landing_url():
    launcher = FakeLauncher(lambda: FakeSession(present={SECOND_STRATEGY}))
    resolver = make_resolver(launcher)

    link = await resolver.resolve(SEARCH_URL)

    session = launcher.sessions[0]
    assert link == PROBLEM_URL
    assert session.called("navigate") == [SEARCH_URL]
    assert session.called("click") == [SECOND_STRATEGY]
    assert session.close_count == 1


@pytest.mark.asyncio
async def test_resolve_uses_cached_link_without_browser():
    cache = FakeCacheClient()
    await MetadataStore(cache).put(
        "two-sum", ProblemRecord(identifier="two-sum", link="https://cached.example/two-sum")
    )
    launcher = FakeLauncher(FakeSession)
    resolver = make_resolver(launcher, cache)

    link = await resolver.resolve(SEARCH_URL, "two-sum")

    assert link == "https://cached.example/two-sum"
    assert launcher.launches == 0


@pytest.mark.asyncio
async def test_resolve_raises_when_no_strategy_matches_and_closes_session():
    launcher = FakeLauncher(FakeSession)
    resolver = make_resolver(launcher)

    with pytest.raises(ElementNotFoundError):
        await resolver.resolve(SEARCH_URL)

    assert launcher.sessions[0].close_count == 1


@pytest.mark.asyncio
async def test_resolve_does_not_write_back_by_default():
    cache = FakeCacheClient()
    await MetadataStore(cache).put("two-sum", ProblemRecord(identifier="two-sum"))
    cache.writes.clear()
    launcher = FakeLauncher(lambda: FakeSession(present={SECOND_STRATEGY}))

    await make_resolver(launcher, cache).resolve(SEARCH_URL, "two-sum")

    assert cache.writes == []


@pytest.mark.asyncio
async def test_write_back_updates_existing_record_only():
    cache = FakeCacheClient()
    await MetadataStore(cache).put(
        "two-sum", ProblemRecord(identifier="two-sum", topics=("Array",))
    )
    launcher = FakeLauncher(lambda: FakeSession(present={SECOND_STRATEGY}))
    resolver = make_resolver(launcher, cache, write_back=True)

    await resolver.resolve(SEARCH_URL, "two-sum")
    await resolver.resolve(SEARCH_URL, "three-sum")

    assert cache.data["two-sum"]["link"] == PROBLEM_URL
    assert cache.data["two-sum"]["topics"] == '["Array"]'
    assert "three-sum" not in cache.data


@pytest.mark.asyncio
async def test_follow_waits_for_url_committed_after_click():
    session = FakeSession(present={SECOND_STRATEGY}, navigation_delay=0.05)
    resolver = make_resolver(FakeLauncher(FakeSession))

    link = await resolver.follow(session, SEARCH_URL)

    assert link == PROBLEM_URL
    assert session.called("wait_for_url_change") == [SEARCH_URL]


@pytest.mark.asyncio
async def test_follow_returns_current_url_when_page_never_leaves():
    session = FakeSession(present={SECOND_STRATEGY}, landing_url=SEARCH_URL)
    resolver = LinkResolver(
        store=MetadataStore(),
        session_factory=make_factory(FakeLauncher(FakeSession)),
        locator=ElementLocator(),
        settle_timeout_ms=20,
    )

    link = await resolver.follow(session, SEARCH_URL)

    assert link == SEARCH_URL
