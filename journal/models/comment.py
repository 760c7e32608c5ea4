"""
Journal Backend — Comment SQLAlchemy Model
============================================

What:  ORM model for the `comments` table: a named remark attached to an entry.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from journal.database import Base, utcnow

if TYPE_CHECKING:
    from journal.models.entry import Entry


class Comment(Base):
    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    entry_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("entries.id", ondelete="CASCADE"),
        nullable=False,
    )

    content: Mapped[str] = mapped_column(Text, nullable=False)

    author_name: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )

    entry: Mapped["Entry"] = relationship(back_populates="comments")

    __table_args__ = (
        Index("idx_comments_entry_id", "entry_id"),
    )

    def __repr__(self) -> str:
        return f"<Comment(id={self.id}, entry_id={self.entry_id}, author='{self.author_name}')>"
