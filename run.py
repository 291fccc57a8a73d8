"""Entry point for the Quiz Content API server.

This script serves the FastAPI application with uvicorn.  It is
intended to be executed from the project root, for example under
Docker or a process manager where you only specify a single Python
file to run.

Host and port come from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``4000``); see
``quiz_content_api/app/core/config.py`` for the remaining settings.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from quiz_content_api.app.core.config import settings
from quiz_content_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        # Keep the handlers installed by setup_logging instead of
        # uvicorn's default dictConfig.
        log_config=None,
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Server stopped")


if __name__ == "__main__":
    main()
