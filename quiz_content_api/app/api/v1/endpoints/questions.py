"""
Question endpoints for API v1.

Each question is returned together with the title, Rive file and
state machine of its category so that clients can animate it without
a second lookup.  Asking for one unknown category is an error, while
unknown titles in a multi‑category request are silently skipped.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Query, Request

from quiz_content_api.app.core.assets import request_origin
from quiz_content_api.app.core.errors import ValidationError
from quiz_content_api.app.services.category_engine import parse_title_list
from quiz_content_api.app.services.category_service import CategoryService

router = APIRouter()


@router.get("", response_model=List[Dict[str, Any]])
async def list_questions(
    request: Request,
    category: Optional[str] = Query(None, description="Exact, case‑sensitive category title"),
) -> List[Dict[str, Any]]:
    """Return the questions of a single category.

    Responds with 400 when ``category`` is missing and 404 when no
    category carries that title.
    """
    if not category:
        raise ValidationError("Category param required")
    return await CategoryService.get_questions(category, request_origin(request))


@router.get("/multi", response_model=List[Dict[str, Any]])
async def list_questions_multi(
    request: Request,
    categories: Optional[str] = Query(None, description="Comma‑separated category titles"),
) -> List[Dict[str, Any]]:
    """Return the questions of several categories in the order requested."""
    if not categories:
        raise ValidationError("Categories param required")
    titles = parse_title_list(categories)
    return await CategoryService.get_questions_multi(titles, request_origin(request))
