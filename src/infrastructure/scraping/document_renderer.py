"""Renders an article page into a print-stable PDF."""

from typing import Optional

from loguru import logger

from domain.exceptions import LanguageUnavailableError
from domain.models import PdfOptions, RenderedDocument
from domain.parsers.filename import sanitize_filename
from infrastructure.interfaces import BrowserSessionProtocol

from .render_plan import DEFAULT_RENDER_PLAN, RenderPlan

LANGUAGE_TAB_SELECTOR = '.code-tab[data-lang="{language}"]'

_SELECT_LANGUAGE_SCRIPT = """
(selector) => {
  const tab = document.querySelector(selector);
  if (tab) tab.click();
}
"""


def language_tab_selector(language: str) -> str:
    escaped = language.replace("\\", "\\\\").replace('"', '\\"')
    return LANGUAGE_TAB_SELECTOR.format(language=escaped)


class DocumentRenderer:
    """Checks the language tab, normalizes the page, and captures it."""

    def __init__(
        self,
        plan: RenderPlan = DEFAULT_RENDER_PLAN,
        pdf_options: Optional[PdfOptions] = None,
        navigation_timeout_ms: int = 90_000,
        wait_until: str = "networkidle",
    ):
        self.plan = plan
        self.pdf_options = pdf_options or PdfOptions()
        self.navigation_timeout_ms = navigation_timeout_ms
        self.wait_until = wait_until

    async def render(
        self, session: BrowserSessionProtocol, url: str, language: str
    ) -> RenderedDocument:
        """
        Render the article at url with code shown in the given language.

        Raises:
            LanguageUnavailableError: If the page has no tab for the language.
                Nothing on the page is modified in that case.
            NavigationTimeoutError: If the page does not settle in time.
        """
        await session.navigate(url, wait_until=self.wait_until, timeout_ms=self.navigation_timeout_ms)

        tab = language_tab_selector(language)
        if not await session.exists(tab):
            logger.info(f"Language tab '{language}' not found on {url}")
            raise LanguageUnavailableError(language)

        await session.evaluate(_SELECT_LANGUAGE_SCRIPT, tab)

        skipped = await self.plan.apply(session)
        if skipped:
            logger.debug(f"Skipped {len(skipped)} render step(s): {', '.join(skipped)}")

        suggested_name = sanitize_filename(await session.title())
        content = await session.render_pdf(self.pdf_options)

        logger.info(f"Rendered '{suggested_name}' ({len(content)} bytes)")
        return RenderedDocument(content=content, suggested_name=suggested_name)
