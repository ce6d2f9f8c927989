"""Browser launch configuration."""

from dataclasses import dataclass
from typing import Optional

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)

DEFAULT_LAUNCH_ARGS: tuple[str, ...] = (
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
    "--disable-blink-features=AutomationControlled",
)


@dataclass(frozen=True)
class BrowserConfig:
    """Everything needed to launch one headless browser."""

    headless: bool = True
    executable_path: Optional[str] = None
    args: tuple[str, ...] = DEFAULT_LAUNCH_ARGS
    user_agent: str = DEFAULT_USER_AGENT
    viewport_width: int = 1280
    viewport_height: int = 800
    navigation_timeout_ms: int = 60_000
