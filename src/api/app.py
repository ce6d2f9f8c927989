"""Litestar application factory."""

from typing import Optional

from litestar import Litestar
from litestar.config.cors import CORSConfig
from litestar.contrib.pydantic import PydanticPlugin
from litestar.datastructures import State
from litestar.di import Provide
from litestar.exceptions import ValidationException

from api.dependencies import provide_orchestrator, start_orchestrator, stop_orchestrator
from api.errors import scraper_exception_handler, validation_exception_handler
from api.routes import ProblemController
from application.orchestrator import ScrapeOrchestrator
from config import Settings
from domain.exceptions import ProblemScraperError


def create_app(
    settings: Optional[Settings] = None,
    orchestrator: Optional[ScrapeOrchestrator] = None,
) -> Litestar:
    """
    Create the API application.

    Args:
        settings: Application settings (read from the environment when omitted)
        orchestrator: Prebuilt orchestrator; built on startup when omitted
    """
    settings = settings or Settings.from_env()

    return Litestar(
        route_handlers=[ProblemController],
        dependencies={"orchestrator": Provide(provide_orchestrator)},
        exception_handlers={
            ProblemScraperError: scraper_exception_handler,
            ValidationException: validation_exception_handler,
        },
        # Response models serialize with their camelCase aliases.
        plugins=[PydanticPlugin(prefer_alias=True)],
        cors_config=CORSConfig(allow_origins=["*"], expose_headers=["Content-Disposition"]),
        state=State({"settings": settings, "orchestrator": orchestrator, "cache_client": None}),
        on_startup=[start_orchestrator],
        on_shutdown=[stop_orchestrator],
    )
