"""Entry point for the Business Directory API.

Launches the FastAPI application under uvicorn.  It is intended to be
executed from the project root, e.g. in a container where only a single
Python file is specified.

Configuration (database location, log level, default language, seeding
of the sample catalog) is read from environment variables; see
``business_directory_api/app/core/config.py`` for the full list.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from business_directory_api.app.core.config import settings
from business_directory_api.app.main import app


async def main() -> None:
    """Serve the API on ``API_HOST``:``API_PORT`` until interrupted."""
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
