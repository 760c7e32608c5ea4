"""
Journal Backend — Shared Schema Pieces
========================================

What:  Base model with the camelCase wire convention, the `{message}` body
       used for acknowledgements and errors, and the health document.

Wire convention:
    Python attributes are snake_case; JSON keys are camelCase
    (category_id ↔ categoryId). Request bodies accept either spelling.
"""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from journal.database import as_utc

# SQLite hands timestamps back naive; they are always stored as UTC
UTCDateTime = Annotated[datetime, AfterValidator(as_utc)]


class CamelModel(BaseModel):
    """Base for every API model: camelCase aliases, buildable from ORM objects."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def require_text(value: Optional[str], message: str) -> str:
    """Reject missing, empty and whitespace-only strings with a French message."""
    if value is None or not value.strip():
        raise ValueError(message)
    return value


class MessageResponse(BaseModel):
    """
    What:  `{message}` acknowledgement returned by DELETE endpoints.

    Example:
        {"message": "Entrée supprimée avec succès"}
    """
    message: str = Field(description="Human-readable (French) message")


class ErrorResponse(BaseModel):
    """
    What:  Error envelope shared by every failing endpoint.

    Example:
        {"message": "Entrée non trouvée"}
    """
    message: str = Field(description="Human-readable (French) error description")


class HealthResponse(BaseModel):
    """Health check document returned by GET /health."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
