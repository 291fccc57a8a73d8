"""
Public category listing for API v1.

Game clients use this list to build the category picker.  Only
metadata is returned; questions are fetched separately through the
question endpoints.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Request

from quiz_content_api.app.core.assets import request_origin
from quiz_content_api.app.services.category_service import CategoryService

router = APIRouter()


@router.get("", response_model=List[Dict[str, Any]])
async def list_categories(request: Request) -> List[Dict[str, Any]]:
    """Return every category without its questions.

    ``riveFile`` is an absolute URL on this server; ``locked`` and
    ``adult`` are always present.  Stored values are passed through
    without validation.
    """
    return await CategoryService.list_brief(request_origin(request))
