"""Ordered DOM transformations that make an article page print-stable."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from loguru import logger

from infrastructure.interfaces import BrowserSessionProtocol

_EXPAND_SCRIPT = """
(selector) => {
  const nodes = document.querySelectorAll(selector);
  nodes.forEach((node) => node.setAttribute('open', 'true'));
  return nodes.length;
}
"""

_STYLE_SCRIPT = """
({ selector, styles }) => {
  const nodes = document.querySelectorAll(selector);
  nodes.forEach((node) => Object.assign(node.style, styles));
  return nodes.length;
}
"""

_CLICK_SCRIPT = """
(selector) => {
  const node = document.querySelector(selector);
  if (!node) return 0;
  node.click();
  return 1;
}
"""

_REMOVE_SCRIPT = """
({ selector, firstOnly }) => {
  const nodes = firstOnly
    ? [document.querySelector(selector)].filter(Boolean)
    : Array.from(document.querySelectorAll(selector));
  nodes.forEach((node) => node.remove());
  return nodes.length;
}
"""

_REMOVE_CLASSES_SCRIPT = """
({ selector, classes }) => {
  const nodes = document.querySelectorAll(selector);
  nodes.forEach((node) => node.classList.remove(...classes));
  return nodes.length;
}
"""


class RenderStep(ABC):
    """One idempotent page mutation; a missing target means the step is skipped."""

    name: str

    @abstractmethod
    async def apply(self, session: BrowserSessionProtocol) -> int:
        """Apply the step and return how many elements it touched."""


@dataclass(frozen=True)
class ExpandCollapsibles(RenderStep):
    name: str
    selector: str = "details"

    async def apply(self, session: BrowserSessionProtocol) -> int:
        return await session.evaluate(_EXPAND_SCRIPT, self.selector)


@dataclass(frozen=True)
class ApplyInlineStyle(RenderStep):
    name: str
    selector: str
    styles: tuple[tuple[str, str], ...]

    async def apply(self, session: BrowserSessionProtocol) -> int:
        return await session.evaluate(
            _STYLE_SCRIPT, {"selector": self.selector, "styles": dict(self.styles)}
        )


@dataclass(frozen=True)
class ClickControl(RenderStep):
    name: str
    selector: str

    async def apply(self, session: BrowserSessionProtocol) -> int:
        return await session.evaluate(_CLICK_SCRIPT, self.selector)


@dataclass(frozen=True)
class RemoveElements(RenderStep):
    name: str
    selector: str
    first_only: bool = False

    async def apply(self, session: BrowserSessionProtocol) -> int:
        return await session.evaluate(
            _REMOVE_SCRIPT, {"selector": self.selector, "firstOnly": self.first_only}
        )


@dataclass(frozen=True)
class RemoveClasses(RenderStep):
    name: str
    selector: str
    classes: tuple[str, ...]

    async def apply(self, session: BrowserSessionProtocol) -> int:
        return await session.evaluate(
            _REMOVE_CLASSES_SCRIPT, {"selector": self.selector, "classes": list(self.classes)}
        )


@dataclass(frozen=True)
class InjectStyle(RenderStep):
    name: str
    css: str

    async def apply(self, session: BrowserSessionProtocol) -> int:
        await session.add_style(self.css)
        return 1


@dataclass(frozen=True)
class RenderPlan:
    """Steps applied in order before the page is captured."""

    steps: tuple[RenderStep, ...]

    async def apply(self, session: BrowserSessionProtocol) -> list[str]:
        """Run every step; returns the names of steps whose target was absent."""
        skipped = []
        for step in self.steps:
            touched = await step.apply(session)
            if touched:
                logger.debug(f"Render step '{step.name}' touched {touched} element(s)")
            else:
                logger.debug(f"Render step '{step.name}' skipped, target absent")
                skipped.append(step.name)
        return skipped


PRINT_COLOR_CSS = """
* {
  -webkit-print-color-adjust: exact !important;
  print-color-adjust: exact !important;
  color-adjust: exact !important;
  color: #000000 !important;
}
body, p, span, div, strong, em, h1, h2, h3, h4, h5, h6, a {
  color: #000000 !important;
  -webkit-text-fill-color: #000000 !important;
  -webkit-text-stroke: 0px #000000 !important;
}
"""

FONT_SMOOTHING_CSS = """
* {
  -webkit-font-smoothing: none !important;
  -moz-osx-font-smoothing: auto !important;
  text-shadow: 0 0 0 currentColor !important;
}
"""

HIDE_CHROME_CSS = """
header, .sticky, .fixed, .top-0, .top-10 {
  display: none !important;
}
body, html {
  margin: 0 !important;
  padding: 0 !important;
  background: #ffffff !important;
}
"""

_UNCLIPPED = (("overflow", "visible"), ("overflowX", "visible"), ("overflowY", "visible"))

DEFAULT_RENDER_PLAN = RenderPlan(
    steps=(
        ExpandCollapsibles("expand details"),
        ApplyInlineStyle("unclip page container", ".h-screen", _UNCLIPPED + (("height", "auto"),)),
        ClickControl("toggle theme", ".theme-toggle"),
        RemoveElements("remove sticky ad", ".sticky.top-10", first_only=True),
        RemoveClasses("widen content", ".w-full.flex-col", ("md:w-[80%]",)),
        RemoveElements("remove top header", r".mt-\[56px\].lg\:mt-0"),
        RemoveElements("remove nav header", r".bg-white.dark\:bg-\[\#161A20\]"),
        RemoveElements("remove video embeds", ".dsa_article_youtube_video"),
        RemoveElements("remove acknowledgements", ".wp-block-quote"),
        RemoveElements("remove floating contents button", r"button.fixed.lg\:hidden"),
        InjectStyle("force print colours", PRINT_COLOR_CSS),
        InjectStyle("disable font smoothing", FONT_SMOOTHING_CSS),
        ApplyInlineStyle(
            "unclip scroll container",
            ".scroll-container",
            (("height", "auto"), ("overflow", "visible")),
        ),
        ApplyInlineStyle(
            "unclip code blocks",
            ".code-block.dsa_article_code_active, .code-content",
            (("maxHeight", "none"), ("height", "auto"), ("overflow", "visible")),
        ),
        InjectStyle("hide fixed chrome", HIDE_CHROME_CSS),
        RemoveClasses("strip dark mode", "html, body", ("dark", "overflow-hidden")),
    )
)
