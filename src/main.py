"""Entry point for the problem scraper API server."""

import uvicorn

from api.app import create_app
from config import Settings, setup_logging


def main() -> None:
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
