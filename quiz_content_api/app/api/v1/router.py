"""
Top‑level router for version 1 of the API.

Public routes (``/categories``, ``/questions``) serve the game clients;
``/admin/categories`` is used by content management tools.  The admin
routes carry no authentication.
"""

from fastapi import APIRouter

from .endpoints import admin, categories, questions

router = APIRouter()

router.include_router(categories.router, prefix="/categories", tags=["categories"])
router.include_router(questions.router, prefix="/questions", tags=["questions"])
router.include_router(admin.router, prefix="/admin/categories", tags=["admin"])
