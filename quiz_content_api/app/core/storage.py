"""
JSON file persistence for the category collection.

The whole collection lives in a single backing document: a JSON array
of category objects.  ``load_categories`` reads and parses it on every
call and ``save_categories`` rewrites it in full.  Nothing is cached
between calls, so the document on disk is always the single source of
truth.

Writes go to a temporary file in the same directory which then
replaces the document via ``os.replace`` once its contents have been
fsynced; a crash mid‑write therefore leaves the previous contents in
place.  The document keeps its permission bits across rewrites.
"""

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import settings
from .errors import StorageReadError, StorageWriteError


logger = logging.getLogger(__name__)


def get_categories_path() -> Path:
    """Compute the path to the backing document.

    If ``settings.categories_path`` is absolute, use it directly.
    Otherwise resolve it relative to the project root.
    """
    return settings.resolve_path(settings.categories_path)


def load_categories(path: Optional[Path] = None) -> List[Dict[str, Any]]:
    """Read and parse the backing document.

    Raises ``StorageReadError`` if the file is missing or unreadable,
    is not valid JSON, or does not hold an array of objects.
    """
    path = Path(path) if path is not None else get_categories_path()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as exc:
        raise StorageReadError(f"Backing document {path} does not exist") from exc
    except json.JSONDecodeError as exc:
        raise StorageReadError(f"Backing document {path} is not valid JSON: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise StorageReadError(f"Cannot read backing document {path}: {exc}") from exc

    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise StorageReadError(f"Backing document {path} must hold a JSON array of objects")
    logger.debug("Loaded %d categories from %s", len(data), path)
    return data


def _document_mode(path: Path) -> int:
    """Return the permission bits to give the rewritten document."""
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def save_categories(categories: List[Dict[str, Any]], path: Optional[Path] = None) -> None:
    """Overwrite the backing document with ``categories``.

    The collection is written as indented JSON with fields in their
    stored order.  Raises ``StorageWriteError`` on any I/O failure;
    the previous document is left untouched in that case.
    """
    path = Path(path) if path is not None else get_categories_path()
    payload = json.dumps(categories, indent=2, ensure_ascii=False) + "\n"
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload)
            f.flush()
            os.fsync(f.fileno())
        # mkstemp creates 0600 files; keep the mode the document already had.
        os.chmod(tmp_name, _document_mode(path))
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise StorageWriteError(f"Cannot write backing document {path}: {exc}") from exc
    logger.debug("Saved %d categories to %s", len(categories), path)
