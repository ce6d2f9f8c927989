"""Playwright-backed browser session."""

from typing import Any, Optional

from loguru import logger
from playwright.async_api import Browser, Page, Playwright, async_playwright
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from domain.exceptions import NavigationTimeoutError
from domain.models import PdfOptions

from .config import BrowserConfig


class PlaywrightSession:
    """One Chromium process with a single page."""

    def __init__(self, playwright: Playwright, browser: Browser, page: Page):
        self._playwright = playwright
        self._browser = browser
        self._page = page

    @property
    def url(self) -> str:
        return self._page.url

    async def navigate(self, url: str, wait_until: str, timeout_ms: int) -> None:
        logger.debug(f"Navigating to {url} (wait_until={wait_until})")
        try:
            await self._page.goto(url, wait_until=wait_until, timeout=timeout_ms)
        except PlaywrightTimeoutError as e:
            raise NavigationTimeoutError(url, timeout_ms) from e

    async def wait_for_url_change(self, previous_url: str, wait_until: str, timeout_ms: int) -> bool:
        # Client-side routers commit the new URL some time after the click.
        try:
            await self._page.wait_for_url(
                lambda url: url != previous_url, wait_until=wait_until, timeout=timeout_ms
            )
            return True
        except PlaywrightTimeoutError:
            return False

    async def wait_for_selector(self, selector: str, timeout_ms: int) -> bool:
        try:
            await self._page.wait_for_selector(selector, timeout=timeout_ms)
            return True
        except PlaywrightTimeoutError:
            return False

    async def exists(self, selector: str) -> bool:
        return await self._page.query_selector(selector) is not None

    async def click(self, selector: str, timeout_ms: int) -> None:
        await self._page.click(selector, timeout=timeout_ms)

    async def evaluate(self, script: str, arg: Optional[Any] = None) -> Any:
        return await self._page.evaluate(script, arg)

    async def add_style(self, css: str) -> None:
        await self._page.add_style_tag(content=css)

    async def content(self) -> str:
        return await self._page.content()

    async def title(self) -> str:
        return await self._page.title()

    async def render_pdf(self, options: PdfOptions) -> bytes:
        return await self._page.pdf(
            format=options.format,
            print_background=options.print_background,
            margin=options.margins(),
        )

    async def close(self) -> None:
        try:
            await self._browser.close()
        finally:
            await self._playwright.stop()
        logger.debug("Browser session closed")


async def launch_playwright_session(config: BrowserConfig) -> PlaywrightSession:
    """Launch a fresh headless Chromium and open one page in it."""
    playwright = await async_playwright().start()
    try:
        browser = await playwright.chromium.launch(
            headless=config.headless,
            executable_path=config.executable_path or None,
            args=list(config.args),
        )
        context = await browser.new_context(
            user_agent=config.user_agent,
            viewport={"width": config.viewport_width, "height": config.viewport_height},
        )
        page = await context.new_page()
        page.set_default_navigation_timeout(config.navigation_timeout_ms)
    except Exception:
        await playwright.stop()
        raise

    logger.debug("Browser session launched")
    return PlaywrightSession(playwright, browser, page)
