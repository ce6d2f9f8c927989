"""Page scraping and rendering on top of a browser session."""

from .detail_extractor import DetailExtractor
from .document_renderer import DocumentRenderer, language_tab_selector
from .element_locator import ElementLocator
from .render_plan import DEFAULT_RENDER_PLAN, RenderPlan, RenderStep

__all__ = [
    "DEFAULT_RENDER_PLAN",
    "DetailExtractor",
    "DocumentRenderer",
    "ElementLocator",
    "RenderPlan",
    "RenderStep",
    "language_tab_selector",
]
