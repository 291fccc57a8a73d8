"""
Main entrypoint for the Quiz Content API.

This module assembles the FastAPI application, sets up logging and
includes the versioned routers.  The ``create_app`` function builds
and configures the app, which is then instantiated at module import
time as ``app``.  Run it with uvicorn, e.g.::

    uvicorn quiz_content_api.app.main:app --reload

or through ``run.py`` at the project root.

Besides the JSON API the app serves the ``public`` directory (Rive
files, the Rive wasm runtime and images) at ``/``.
"""

import logging
import mimetypes

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router


logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(settings.log_level, settings.log_file or None)

    # Browsers refuse to stream‑compile the Rive runtime unless it is
    # served as application/wasm.
    mimetypes.add_type("application/wasm", ".wasm")

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(v1_router, prefix=settings.api_prefix)

    # Static files are mounted last so that API routes take precedence.
    static_dir = settings.resolve_path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir), name="static")
    else:
        logger.warning("Static directory %s not found; static files disabled", static_dir)

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info(
            "API running at http://localhost:%s%s (data: %s)",
            settings.port,
            settings.api_prefix,
            settings.resolve_path(settings.categories_path),
        )

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
