"""
Service layer for categories and their questions.

Every operation loads the full collection from the backing document,
runs the matching ``category_engine`` function and, for mutations,
writes the whole collection back before returning.  No state is kept
between calls.  A mutation is only reported as successful once the
new collection has been saved; a ``StorageWriteError`` propagates to
the caller and the computed result is discarded.

The methods do not await between load and save, so mutations handled
by one worker process never interleave.  Separate worker processes can
still overwrite each other's changes (last write wins).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping

from quiz_content_api.app.core.storage import load_categories, save_categories
from quiz_content_api.app.services import category_engine


logger = logging.getLogger(__name__)


class CategoryService:
    """Service class for reading and managing categories."""

    @classmethod
    async def list_brief(cls, origin: str) -> List[Dict[str, Any]]:
        """Return public metadata for every category."""
        return category_engine.list_categories_brief(load_categories(), origin)

    @classmethod
    async def get_questions(cls, title: str, origin: str) -> List[Dict[str, Any]]:
        """Return the questions of one category or raise ``CategoryNotFound``."""
        return category_engine.get_questions_for_category(load_categories(), title, origin)

    @classmethod
    async def get_questions_multi(cls, titles: Iterable[str], origin: str) -> List[Dict[str, Any]]:
        """Return the questions of several categories; unknown titles are skipped."""
        return category_engine.get_questions_for_categories(load_categories(), titles, origin)

    @classmethod
    async def list_admin(cls, origin: str) -> List[Dict[str, Any]]:
        """Return every category with all stored fields."""
        return category_engine.list_admin_categories(load_categories(), origin)

    @classmethod
    async def create_category(cls, draft: Mapping[str, Any], origin: str) -> Dict[str, Any]:
        """Append a category built from ``draft`` and persist the collection."""
        categories, created = category_engine.create_category(load_categories(), draft, origin)
        save_categories(categories)
        logger.info("Created category %r", created.get("title"))
        return created

    @classmethod
    async def update_category(
        cls, title: str, patch: Mapping[str, Any], origin: str
    ) -> Dict[str, Any]:
        """Merge ``patch`` onto the category titled ``title`` and persist."""
        categories, updated = category_engine.update_category(load_categories(), title, patch, origin)
        save_categories(categories)
        logger.info("Updated category %r (fields: %s)", title, ", ".join(sorted(patch)) or "none")
        return updated

    @classmethod
    async def delete_category(cls, title: str) -> None:
        """Delete every category titled ``title`` and persist."""
        before = load_categories()
        categories = category_engine.delete_category(before, title)
        save_categories(categories)
        logger.info("Deleted %d category record(s) titled %r", len(before) - len(categories), title)
