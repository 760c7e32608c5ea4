"""
Journal Backend — Comment Schemas
"""

from typing import Optional

from pydantic import Field, field_validator

from journal.schemas.common import CamelModel, require_text, UTCDateTime


class CommentCreate(CamelModel):
    """Body of POST /api/entries/{entryId}/comments."""
    content: Optional[str] = Field(default=None, validate_default=True, description="Comment text (required)")
    author_name: Optional[str] = Field(default=None, validate_default=True, description="Author display name (required)")

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: Optional[str]) -> str:
        return require_text(v, "Le contenu du commentaire est requis")

    @field_validator("author_name")
    @classmethod
    def validate_author_name(cls, v: Optional[str]) -> str:
        return require_text(v, "Le nom de l'auteur est requis")


class CommentResponse(CamelModel):
    id: int
    entry_id: int
    content: str
    author_name: str
    created_at: UTCDateTime
