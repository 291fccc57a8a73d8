"""
Administrative category endpoints for API v1.

These routes expose a CRUD API over the category collection for
content management tools.  Categories are addressed by title.  There
is no authentication on these routes; deploy them behind a trusted
network or proxy.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Request

from quiz_content_api.app.core.assets import request_origin
from quiz_content_api.app.schemas.category import (
    CategoryCreate,
    CategoryUpdate,
    DeleteResult,
)
from quiz_content_api.app.services.category_service import CategoryService

router = APIRouter()


@router.get("", response_model=List[Dict[str, Any]])
async def list_admin_categories(request: Request) -> List[Dict[str, Any]]:
    """Return every category with all of its stored fields."""
    return await CategoryService.list_admin(request_origin(request))


@router.post("", response_model=Dict[str, Any])
async def create_category(category_in: CategoryCreate, request: Request) -> Dict[str, Any]:
    """Create a category and append it to the collection.

    Titles are not checked for uniqueness.
    """
    return await CategoryService.create_category(category_in.model_dump(), request_origin(request))


@router.put("/{title}", response_model=Dict[str, Any])
async def update_category(
    title: str, category_in: CategoryUpdate, request: Request
) -> Dict[str, Any]:
    """Overwrite the provided fields of the first category titled ``title``."""
    return await CategoryService.update_category(title, category_in.to_patch(), request_origin(request))


@router.delete("/{title}", response_model=DeleteResult)
async def delete_category(title: str) -> DeleteResult:
    """Delete every category titled ``title``."""
    await CategoryService.delete_category(title)
    return DeleteResult(success=True)
