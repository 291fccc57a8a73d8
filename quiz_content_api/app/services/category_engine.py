"""
Pure query and mutation functions over the category collection.

Categories are plain dictionaries exactly as stored in the backing
document, so fields this module does not know about survive a
load/save cycle.  None of the functions here perform I/O or mutate
their arguments: queries return freshly built response records and
mutations return a new collection alongside the affected record.

The title is the lookup key.  Titles are not required to be unique;
``update_category`` touches the first match while ``delete_category``
removes every match.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from quiz_content_api.app.core.assets import resolve_asset_url
from quiz_content_api.app.core.config import settings
from quiz_content_api.app.core.errors import CategoryNotFound


Category = Dict[str, Any]


def find_category(categories: Iterable[Category], title: str) -> Optional[Category]:
    """Return the first category whose title equals ``title`` exactly."""
    for category in categories:
        if category.get("title") == title:
            return category
    return None


def parse_title_list(raw: str) -> List[str]:
    """Split a comma‑separated list of titles, dropping blank entries."""
    return [name.strip() for name in raw.split(",") if name.strip()]


def _questions_of(category: Category, origin: str) -> List[Dict[str, Any]]:
    """Denormalize the category metadata onto each of its questions."""
    rive_url = resolve_asset_url(origin, category.get("riveFile"))
    state_machine = category.get("stateMachine") or None
    return [
        {
            "text": text,
            "category": category.get("title"),
            "riveFile": rive_url,
            "stateMachine": state_machine,
        }
        for text in category.get("questions") or []
    ]


def _with_resolved_asset(category: Category, origin: str) -> Category:
    return {**category, "riveFile": resolve_asset_url(origin, category.get("riveFile"))}


# ----------------------------------------------------------------------
# Queries
# ----------------------------------------------------------------------


def list_categories_brief(categories: Iterable[Category], origin: str) -> List[Dict[str, Any]]:
    """Project every category to its public metadata, without questions.

    ``locked`` and ``adult`` only fall back to ``False`` when missing or
    ``None``; an explicit value is passed through.
    """
    brief = []
    for category in categories:
        locked = category.get("locked")
        adult = category.get("adult")
        brief.append(
            {
                "title": category.get("title"),
                "riveFile": resolve_asset_url(origin, category.get("riveFile")),
                "stateMachine": category.get("stateMachine") or None,
                "locked": False if locked is None else locked,
                "adult": False if adult is None else adult,
            }
        )
    return brief


def get_questions_for_category(
    categories: Iterable[Category], title: str, origin: str
) -> List[Dict[str, Any]]:
    """Return the questions of the category titled ``title``.

    Raises ``CategoryNotFound`` when no category matches.
    """
    category = find_category(categories, title)
    if category is None:
        raise CategoryNotFound(title)
    return _questions_of(category, origin)


def get_questions_for_categories(
    categories: Iterable[Category], titles: Iterable[str], origin: str
) -> List[Dict[str, Any]]:
    """Concatenate the questions of several categories in request order.

    Titles are trimmed and blank ones ignored.  Unknown titles
    contribute no questions and do not raise.
    """
    categories = list(categories)
    questions: List[Dict[str, Any]] = []
    for title in titles:
        title = title.strip()
        if not title:
            continue
        category = find_category(categories, title)
        if category is not None:
            questions.extend(_questions_of(category, origin))
    return questions


def list_admin_categories(categories: Iterable[Category], origin: str) -> List[Category]:
    """Return every category with all of its stored fields."""
    return [_with_resolved_asset(category, origin) for category in categories]


# ----------------------------------------------------------------------
# Mutations
# ----------------------------------------------------------------------


def create_category(
    categories: List[Category], draft: Mapping[str, Any], origin: str
) -> Tuple[List[Category], Category]:
    """Append a new category built from ``draft``.

    Missing or empty ``riveFile``/``stateMachine`` take the configured
    defaults, missing flags become ``False`` and missing questions an
    empty list.  Returns the new collection and the created record
    with its asset URL resolved.
    """
    locked = draft.get("locked")
    adult = draft.get("adult")
    questions = draft.get("questions")
    new_category: Category = {
        "title": draft.get("title"),
        "riveFile": draft.get("riveFile") or settings.default_rive_file,
        "stateMachine": draft.get("stateMachine") or settings.default_state_machine,
        "locked": False if locked is None else locked,
        "adult": False if adult is None else adult,
        "questions": list(questions) if questions is not None else [],
    }
    return [*categories, new_category], _with_resolved_asset(new_category, origin)


def update_category(
    categories: List[Category], title: str, patch: Mapping[str, Any], origin: str
) -> Tuple[List[Category], Category]:
    """Overwrite the fields given in ``patch`` on the first category titled ``title``.

    Each patched field replaces the stored one wholesale (a new
    ``questions`` list replaces the old list).  The record keeps its
    position.  Raises ``CategoryNotFound`` when nothing matches.
    """
    for index, category in enumerate(categories):
        if category.get("title") == title:
            break
    else:
        raise CategoryNotFound(title)

    updated = dict(categories[index])
    for field, value in patch.items():
        updated[field] = value
    new_categories = list(categories)
    new_categories[index] = updated
    return new_categories, _with_resolved_asset(updated, origin)


def delete_category(categories: List[Category], title: str) -> List[Category]:
    """Remove every category titled ``title``.

    Raises ``CategoryNotFound`` if nothing was removed.
    """
    remaining = [category for category in categories if category.get("title") != title]
    if len(remaining) == len(categories):
        raise CategoryNotFound(title)
    return remaining
