"""
Pydantic schemas for categories and questions.

A category groups question prompts together with the Rive animation
shown while they are played (``riveFile`` plus the ``stateMachine`` to
drive) and two access flags, ``locked`` and ``adult``.  ``CategoryCreate``
is the draft accepted by the admin create endpoint and
``CategoryUpdate`` the partial patch accepted by update.  Responses are
built from the stored records by ``category_engine`` and are not
validated against a schema, so one malformed record cannot break a
listing.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CategoryCreate(BaseModel):
    """Schema for creating a new category.

    Only ``title`` is required.  Omitted fields take their defaults
    when the category is built (see ``category_engine.create_category``).
    """

    title: str = Field(..., examples=["Fire"])
    riveFile: Optional[str] = Field(None, examples=["/rive/fire.riv"])
    stateMachine: Optional[str] = Field(None, examples=["State Machine 1"])
    locked: Optional[bool] = None
    adult: Optional[bool] = None
    questions: Optional[List[str]] = Field(None, examples=[["Who would you save first?"]])


class CategoryUpdate(BaseModel):
    """Schema for updating an existing category.

    All fields are optional; only provided values overwrite the stored
    ones.  Unknown keys are kept and written through to the record.
    """

    model_config = ConfigDict(extra="allow")

    title: Optional[str] = None
    riveFile: Optional[str] = None
    stateMachine: Optional[str] = None
    locked: Optional[bool] = None
    adult: Optional[bool] = None
    questions: Optional[List[str]] = None

    def to_patch(self) -> dict:
        """Return only the fields the client actually sent."""
        patch = self.model_dump(exclude_unset=True)
        patch.update(self.model_extra or {})
        return patch


class DeleteResult(BaseModel):
    success: bool = True
