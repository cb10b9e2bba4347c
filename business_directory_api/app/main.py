"""
Main entrypoint for the Business Directory API.

This module assembles the FastAPI application, sets up logging, builds
the services and includes versioned routers.  ``create_app`` builds and
configures the app, which is then instantiated at module import time as
``app``, so it can be served with::

    uvicorn business_directory_api.app.main:app --reload

The database is opened and migrated on startup, not at import time.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.errors import StoreError
from .core.localization import DEFAULT_LANGUAGE, Language, localize, parse_language
from .core.logging_config import setup_logging
from .services.auth_service import AuthService
from .services.directory_service import DirectoryService
from .services.entity_store import EntityStore
from .services.seed_service import seed_sample_businesses

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the environment-derived module
        default; tests pass their own database location here.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    config = app_settings or settings
    setup_logging(config.log_level, config.log_file or None, config.debug)

    app = FastAPI(title=config.project_name, version=config.api_version, debug=config.debug)

    store = EntityStore(config.database_url)
    app.state.settings = config
    app.state.store = store
    app.state.directory = DirectoryService(store)
    app.state.auth = AuthService(
        store,
        delay_seconds=config.auth_delay_seconds,
        hash_passwords=config.hash_passwords,
    )
    try:
        app.state.default_language = Language(config.default_language)
    except ValueError:
        logger.warning("Unsupported DEFAULT_LANGUAGE %r, using %s", config.default_language, DEFAULT_LANGUAGE.value)
        app.state.default_language = DEFAULT_LANGUAGE

    app.include_router(v1_router, prefix="/api/v1")

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
        # Internal details stay in the log; the client gets the generic
        # server error text.
        logger.error("Unhandled store error on %s %s: %s", request.method, request.url.path, exc)
        language = parse_language(request.headers.get("accept-language"), app.state.default_language)
        return JSONResponse(status_code=500, content={"detail": localize("auth_server_error", language)})

    @app.on_event("startup")
    async def startup_event() -> None:
        store.open()
        if config.seed_sample_data:
            seed_sample_businesses(store)
        app.state.directory.refresh()

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        app.state.directory.close()
        store.close()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
