"""Scoped browser sessions with bounded concurrency."""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable

from loguru import logger

from infrastructure.interfaces import BrowserSessionProtocol

from .config import BrowserConfig

SessionLauncher = Callable[[BrowserConfig], Awaitable[BrowserSessionProtocol]]


class BrowserSessionFactory:
    """
    Launches one browser per request and always closes it.

    At most ``max_concurrent_sessions`` browsers run at once; further requests
    wait for a slot before launching.
    """

    def __init__(
        self,
        config: BrowserConfig,
        launcher: SessionLauncher,
        max_concurrent_sessions: int = 4,
    ):
        if max_concurrent_sessions < 1:
            raise ValueError("max_concurrent_sessions must be at least 1")

        self.config = config
        self.launcher = launcher
        self.max_concurrent_sessions = max_concurrent_sessions
        self._admission = asyncio.Semaphore(max_concurrent_sessions)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[BrowserSessionProtocol]:
        async with self._admission:
            session = await self.launcher(self.config)
            try:
                yield session
            finally:
                try:
                    await session.close()
                except Exception as e:
                    logger.warning(f"Failed to close browser session: {e}")
