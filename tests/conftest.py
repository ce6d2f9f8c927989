"""Shared fakes for the browser session and the hash store."""

import asyncio
from typing import Any, Callable, Iterable, Optional

import pytest

from domain.exceptions import StoreUnavailableError
from domain.models import PdfOptions
from infrastructure.browser import BrowserConfig, BrowserSessionFactory

SEARCH_URL = "https://www.geeksforgeeks.org/search/?gq=Two%20Sum"
PROBLEM_URL = "https://www.geeksforgeeks.org/problems/two-sum/1"

TWO_SUM_HTML = """
<html><body>
  <div class="problems_expected_complexities_text__a1b2">
    <div>O(n)</div>
    <div>O(n)</div>
  </div>
  <div class="problems_active_tags__c3d4">Company Tags</div>
  <div class="ui labels"><a href="#">Google</a></div>
  <div class="ui labels"><a href="#">Array</a><a href="#"> Hashing </a></div>
</body></html>
"""


class FakeSession:
    """In-memory stand-in for a browser page that records every call."""

    def __init__(
        self,
        *,
        present: Iterable[str] = (),
        failing_clicks: Iterable[str] = (),
        html: str = "",
        title: str = "Two Sum",
        landing_url: str = PROBLEM_URL,
        evaluate_result: Optional[Callable[[str, Any], Any]] = None,
        pdf: bytes = b"%PDF-1.4 fake",
        navigation_delay: Optional[float] = None,
    ):
        self.present = set(present)
        self.failing_clicks = set(failing_clicks)
        self.html = html
        self._title = title
        self.landing_url = landing_url
        self.evaluate_result = evaluate_result
        self.pdf = pdf
        self.navigation_delay = navigation_delay
        self.calls: list[tuple[str, Any]] = []
        self.close_count = 0
        self._url = "about:blank"

    @property
    def url(self) -> str:
        return self._url

    def called(self, method: str) -> list[Any]:
        return [arg for name, arg in self.calls if name == method]

    async def navigate(self, url: str, wait_until: str, timeout_ms: int) -> None:
        self.calls.append(("navigate", url))
        self._url = url

    async def wait_for_url_change(self, previous_url: str, wait_until: str, timeout_ms: int) -> bool:
        self.calls.append(("wait_for_url_change", previous_url))
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout_ms / 1000
        while self._url == previous_url:
            if loop.time() >= deadline:
                return False
            await asyncio.sleep(0.005)
        return True

    async def wait_for_selector(self, selector: str, timeout_ms: int) -> bool:
        self.calls.append(("wait_for_selector", selector))
        return selector in self.present

    async def exists(self, selector: str) -> bool:
        self.calls.append(("exists", selector))
        return selector in self.present

    async def click(self, selector: str, timeout_ms: int) -> None:
        self.calls.append(("click", selector))
        if selector in self.failing_clicks:
            raise RuntimeError(f"Element is not clickable: {selector}")
        if self.navigation_delay is None:
            self._url = self.landing_url
        else:
            # Router push that commits after the click has returned.
            asyncio.get_running_loop().call_later(self.navigation_delay, self._land)

    def _land(self) -> None:
        self._url = self.landing_url

    async def evaluate(self, script: str, arg: Optional[Any] = None) -> Any:
        self.calls.append(("evaluate", arg))
        if self.evaluate_result is not None:
            return self.evaluate_result(script, arg)
        return 1

    async def add_style(self, css: str) -> None:
        self.calls.append(("add_style", css))

    async def content(self) -> str:
        self.calls.append(("content", None))
        return self.html

    async def title(self) -> str:
        return self._title

    async def render_pdf(self, options: PdfOptions) -> bytes:
        self.calls.append(("render_pdf", options))
        return self.pdf

    async def close(self) -> None:
        self.close_count += 1


class FakeLauncher:
    """Launcher that hands out fresh FakeSessions built by a factory callable."""

    def __init__(self, make_session: Callable[[], FakeSession]):
        self.make_session = make_session
        self.sessions: list[FakeSession] = []

    @property
    def launches(self) -> int:
        return len(self.sessions)

    async def __call__(self, config: BrowserConfig) -> FakeSession:
        session = self.make_session()
        self.sessions.append(session)
        return session


class FakeCacheClient:
    """Dict-backed hash store."""

    def __init__(self, data: Optional[dict[str, dict[str, str]]] = None, fail: bool = False):
        self.data = data or {}
        self.fail = fail
        self.writes: list[tuple[str, dict[str, str]]] = []

    async def hgetall(self, key: str) -> dict[str, str]:
        if self.fail:
            raise StoreUnavailableError("connection refused")
        return dict(self.data.get(key, {}))

    async def replace_hash(self, key: str, mapping: dict[str, str]) -> None:
        if self.fail:
            raise StoreUnavailableError("connection refused")
        self.writes.append((key, dict(mapping)))
        self.data[key] = dict(mapping)


def make_factory(launcher: FakeLauncher, max_concurrent_sessions: int = 4) -> BrowserSessionFactory:
    return BrowserSessionFactory(
        BrowserConfig(), launcher=launcher, max_concurrent_sessions=max_concurrent_sessions
    )


@pytest.fixture
def cache_client() -> FakeCacheClient:
    return FakeCacheClient()
