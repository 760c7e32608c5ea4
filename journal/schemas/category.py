"""
Journal Backend — Category Schemas
"""

from typing import Optional

from pydantic import Field, field_validator

from journal.schemas.common import CamelModel, require_text, UTCDateTime


class CategoryCreate(CamelModel):
    """Body of POST /api/categories."""
    name: Optional[str] = Field(default=None, validate_default=True, description="Category name (required)")
    description: Optional[str] = Field(default=None, description="Optional description")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Optional[str]) -> str:
        return require_text(v, "Le nom de la catégorie est requis")


class CategoryResponse(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    created_at: UTCDateTime
