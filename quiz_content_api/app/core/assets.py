"""
Resolution of Rive asset references into absolute URLs.

The backing document stores asset references relative to the static
root, either as a path (``/rive/fire.riv``) or as a bare file name
(``fire.riv``).  Responses carry absolute URLs built from the origin of
the incoming request, so the same document works behind any host name.
"""

from typing import Optional

from fastapi import Request


RIVE_SUBPATH = "/rive/"


def resolve_asset_url(base_origin: str, reference: Optional[str]) -> Optional[str]:
    """Return the absolute URL for ``reference`` under ``base_origin``.

    ``None`` or an empty reference yields ``None``.  References that
    start with ``/`` are joined to the origin as is; bare file names
    are placed under ``/rive/``.
    """
    if not reference:
        return None
    origin = base_origin.rstrip("/")
    if reference.startswith("/"):
        return f"{origin}{reference}"
    return f"{origin}{RIVE_SUBPATH}{reference}"


def request_origin(request: Request) -> str:
    """Return ``scheme://host[:port]`` (plus root path) of ``request``."""
    return str(request.base_url).rstrip("/")
