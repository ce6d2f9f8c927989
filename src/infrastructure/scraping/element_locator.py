"""Finds and activates one element out of several possible markup shapes."""

from collections.abc import Sequence

from loguru import logger

from domain.models import ActivationResult, AttemptOutcome, LocatorAttempt, LocatorStrategy
from infrastructure.interfaces import BrowserSessionProtocol


class ElementLocator:
    """Tries locator strategies in order until one element is clicked."""

    def __init__(self, wait_timeout_ms: int = 4000, click_timeout_ms: int = 4000):
        self.wait_timeout_ms = wait_timeout_ms
        self.click_timeout_ms = click_timeout_ms

    async def activate(
        self, strategies: Sequence[LocatorStrategy], session: BrowserSessionProtocol
    ) -> bool:
        """Click the first element any strategy finds; False when all are exhausted."""
        result = await self.run(strategies, session)
        return result.activated

    async def run(
        self, strategies: Sequence[LocatorStrategy], session: BrowserSessionProtocol
    ) -> ActivationResult:
        attempts: list[LocatorAttempt] = []

        for strategy in strategies:
            attempt = await self._attempt(strategy, session)
            attempts.append(attempt)
            if attempt.outcome is AttemptOutcome.ACTIVATED:
                logger.debug(f"Activated element via {strategy} after {len(attempts)} attempt(s)")
                break

        result = ActivationResult(attempts=tuple(attempts))
        if not result.activated:
            logger.debug(f"All {len(attempts)} locator strategies exhausted")
        return result

    async def _attempt(
        self, strategy: LocatorStrategy, session: BrowserSessionProtocol
    ) -> LocatorAttempt:
        selector = strategy.selector
        try:
            if not await session.wait_for_selector(selector, self.wait_timeout_ms):
                return LocatorAttempt(strategy, AttemptOutcome.NOT_FOUND)
            await session.click(selector, self.click_timeout_ms)
        except Exception as e:
            logger.debug(f"Locator {strategy} failed: {e}")
            return LocatorAttempt(strategy, AttemptOutcome.FAILED, detail=str(e))

        return LocatorAttempt(strategy, AttemptOutcome.ACTIVATED)
