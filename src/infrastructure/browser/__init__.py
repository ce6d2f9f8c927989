"""Browser automation."""

from .config import BrowserConfig
from .factory import BrowserSessionFactory, SessionLauncher
from .playwright_session import PlaywrightSession, launch_playwright_session

__all__ = [
    "BrowserConfig",
    "BrowserSessionFactory",
    "PlaywrightSession",
    "SessionLauncher",
    "launch_playwright_session",
]
