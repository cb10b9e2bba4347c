"""
Application package initializer.

The project is split into ``core`` (configuration, database, logging,
localization and geospatial helpers), ``schemas`` (pydantic records),
``services`` (store, directory and authentication logic) and ``api``
(versioned FastAPI routers).  ``create_app`` in ``main`` wires the
services together; nothing here is a module-level singleton except the
ASGI ``app`` created for uvicorn.
"""

from .main import app, create_app  # noqa: F401
