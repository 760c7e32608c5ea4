"""
Journal Backend — Entry Schemas
=================================

What:  Request/response models for /api/entries.

categoryId normalization:
    Any falsy value (null, missing, 0, "", false) is stored as null.
    Category ids start at 1, so 0 never names a real category.
"""

from typing import Any, Optional

from pydantic import Field, field_validator

from journal.schemas.category import CategoryResponse
from journal.schemas.common import CamelModel, require_text, UTCDateTime


class EntryWrite(CamelModel):
    """
    Body of POST /api/entries and PATCH /api/entries/{id}.

    PATCH is a full replace of the three mutable fields, so both requests
    share the same model.
    """
    title: Optional[str] = Field(default=None, validate_default=True, description="Entry title (required)")
    content: Optional[str] = Field(default=None, validate_default=True, description="Entry body (required)")
    category_id: Optional[int] = Field(default=None, description="Category id or null")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: Optional[str]) -> str:
        return require_text(v, "Le titre est requis")

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: Optional[str]) -> str:
        return require_text(v, "Le contenu est requis")

    @field_validator("category_id", mode="before")
    @classmethod
    def normalize_category_id(cls, v: Any) -> Any:
        return v or None


class EntryResponse(CamelModel):
    """
    A single entries row, as returned by create and update.

    Example:
        {"id": 1, "title": "T", "content": "C", "categoryId": null,
         "date": "2024-05-01T09:00:00Z", "updatedAt": "2024-05-01T09:00:00Z"}
    """
    id: int
    title: str
    content: str
    category_id: Optional[int] = None
    date: UTCDateTime
    updated_at: UTCDateTime


class EntryWithCategory(EntryResponse):
    """Entry joined with its category (null when uncategorized); list and detail reads."""
    category: Optional[CategoryResponse] = None
