"""
Journal Backend — Media SQLAlchemy Model
==========================================

What:  ORM model for the `media` table: one uploaded file attached to an entry.

    - type: "image" | "video" | "pdf" | "other", derived from the upload MIME type
    - url:  server-relative path of the stored file, e.g. /uploads/<uuid>.png
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from journal.database import Base, utcnow

if TYPE_CHECKING:
    from journal.models.entry import Entry


MEDIA_TYPES = ("image", "video", "pdf", "other")


class Media(Base):
    __tablename__ = "media"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    entry_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("entries.id", ondelete="CASCADE"),
        nullable=False,
    )

    type: Mapped[str] = mapped_column(Text, nullable=False)

    url: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )

    entry: Mapped["Entry"] = relationship(back_populates="media")

    __table_args__ = (
        Index("idx_media_entry_id", "entry_id"),
    )

    def __repr__(self) -> str:
        return f"<Media(id={self.id}, entry_id={self.entry_id}, type='{self.type}')>"
