"""
Journal Backend — Media Schemas
"""

from pydantic import Field

from journal.schemas.common import CamelModel, UTCDateTime


class MediaResponse(CamelModel):
    """
    What:  One uploaded file attached to an entry.

    Example:
        {"id": 3, "entryId": 1, "type": "image",
         "url": "/uploads/0b6f...c2.png", "createdAt": "2024-05-01T09:00:00Z"}
    """
    id: int
    entry_id: int
    type: str = Field(description="image, video, pdf or other")
    url: str = Field(description="Server-relative path of the stored file")
    created_at: UTCDateTime
