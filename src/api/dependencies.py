from typing import TYPE_CHECKING

from loguru import logger

from application.orchestrator import ScrapeOrchestrator
from config import Settings
from infrastructure.cache_redis import connect_cache
from services import create_orchestrator

if TYPE_CHECKING:
    from litestar import Litestar
    from litestar.datastructures import State


async def provide_orchestrator(state: "State") -> ScrapeOrchestrator:
    return state.orchestrator


async def start_orchestrator(app: "Litestar") -> None:
    """Connect the cache and build the process-wide orchestrator."""
    if app.state.get("orchestrator") is not None:
        return

    settings: Settings = app.state.settings
    cache_client = await connect_cache(settings.redis_url)
    app.state.cache_client = cache_client
    app.state.orchestrator = create_orchestrator(settings, cache_client)
    logger.info(
        f"Orchestrator ready (cache={'on' if cache_client else 'off'}, "
        f"max_concurrent_sessions={settings.max_concurrent_sessions})"
    )


async def stop_orchestrator(app: "Litestar") -> None:
    cache_client = app.state.get("cache_client")
    if cache_client is not None:
        await cache_client.close()
        app.state.cache_client = None
