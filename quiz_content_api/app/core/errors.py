"""
Error types raised by the category store and their HTTP mapping.

Every error derives from ``ContentError`` and carries the HTTP status
code and the short public message sent to clients.  Client faults
(missing query parameters, unknown categories) are reported verbatim;
storage faults are logged with their traceback and answered with a
generic message so that file paths and parser details never leave the
server.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class ContentError(Exception):
    """Base class for all category store errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(ContentError):
    """A required query parameter is missing or empty."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


class CategoryNotFound(ContentError):
    """No category carries the requested title."""

    status_code = status.HTTP_404_NOT_FOUND
    message = "Category not found"

    def __init__(self, title: str) -> None:
        self.title = title
        super().__init__()


class StorageError(ContentError):
    """The backing document could not be read or written."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__()

    def __str__(self) -> str:
        return self.detail


class StorageReadError(StorageError):
    """The backing document is missing, unreadable or malformed."""


class StorageWriteError(StorageError):
    """The backing document could not be overwritten."""


async def content_error_handler(request: Request, exc: ContentError) -> JSONResponse:
    """Translate a ``ContentError`` into a JSON error response."""
    if isinstance(exc, StorageError):
        logger.error(
            "Storage failure on %s %s: %s",
            request.method,
            request.url.path,
            exc.detail,
            exc_info=exc,
        )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    """Install the ``ContentError`` handler on ``app``."""
    app.add_exception_handler(ContentError, content_error_handler)
