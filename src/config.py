"""Process configuration loaded from the environment."""

import os
import sys
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

from domain.models import IdentifierSource
from infrastructure.browser import BrowserConfig


def _get_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _get_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid integer for {name}: {value!r}, using {default}")
        return default


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    redis_url: Optional[str] = None
    cache_key_prefix: str = ""
    cache_links: bool = False
    identifier_source: IdentifierSource = IdentifierSource.REQUEST
    browser: BrowserConfig = field(default_factory=BrowserConfig)
    max_concurrent_sessions: int = 4
    locator_wait_ms: int = 4000
    settle_timeout_ms: int = 5000
    render_navigation_timeout_ms: int = 90_000
    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from the environment (and a .env file, if present)."""
        load_dotenv()

        source = os.getenv("IDENTIFIER_SOURCE", IdentifierSource.REQUEST.value).strip().lower()
        try:
            identifier_source = IdentifierSource(source)
        except ValueError:
            logger.warning(f"Unknown IDENTIFIER_SOURCE {source!r}, using 'request'")
            identifier_source = IdentifierSource.REQUEST

        browser = BrowserConfig(
            headless=_get_bool("BROWSER_HEADLESS", True),
            executable_path=(
                os.getenv("BROWSER_EXECUTABLE_PATH") or os.getenv("PUPPETEER_EXECUTABLE_PATH") or None
            ),
            navigation_timeout_ms=_get_int("NAVIGATION_TIMEOUT_MS", 60_000),
        )

        return cls(
            redis_url=os.getenv("REDIS_URL") or None,
            cache_key_prefix=os.getenv("CACHE_KEY_PREFIX", ""),
            cache_links=_get_bool("CACHE_LINKS", False),
            identifier_source=identifier_source,
            browser=browser,
            max_concurrent_sessions=max(1, _get_int("MAX_CONCURRENT_SESSIONS", 4)),
            locator_wait_ms=_get_int("LOCATOR_WAIT_MS", 4000),
            settle_timeout_ms=_get_int("SETTLE_TIMEOUT_MS", 5000),
            render_navigation_timeout_ms=_get_int("RENDER_NAVIGATION_TIMEOUT_MS", 90_000),
            host=os.getenv("HOST", "0.0.0.0"),
            port=_get_int("PORT", 3001),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


def setup_logging(level: str = "INFO") -> None:
    """Replace loguru's default sink with one at the configured level."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
    )
