"""
Main entrypoint for the Pokémon Adoption API.

This module assembles the FastAPI application, sets up logging, CORS
and error handlers and includes the API router.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``::

    uvicorn pokemon_adoption_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.endpoints import health
from .api.error_handlers import register_error_handlers
from .api.router import router as api_router
from .core.config import settings
from .core.db import get_database_path, init_db
from .core.logging_config import setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Logging is configured first so that everything below can log.
    The schema is created on startup.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(api_router, prefix="/api")
    app.include_router(health.router, tags=["health"])

    @app.on_event("startup")
    async def startup_event() -> None:
        init_db()
        logging.getLogger(__name__).info("Database ready at %s", get_database_path())

    return app


app = create_app()
