"""
Journal Backend — Entry SQLAlchemy Model
==========================================

What:  ORM model for the `entries` table, the only mutable entity.
Who:   EntryRepository (CRUD); Media and Comment rows hang off it.

Column notes:
    - date:        set once at creation, never changed afterwards
    - updated_at:  equal to `date` at creation, bumped on every update
    - category_id: nullable reference to categories.id (no cascade)

Deleting an entry removes its media and comments through the
ON DELETE CASCADE foreign keys declared on those tables; the ORM
relationships use passive_deletes so the database does the work.
"""

from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from journal.database import Base, utcnow

if TYPE_CHECKING:
    from journal.models.category import Category
    from journal.models.comment import Comment
    from journal.models.media import Media


class Entry(Base):
    """A dated journal post with a title and free-text content."""

    __tablename__ = "entries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(Text, nullable=False)

    content: Mapped[str] = mapped_column(Text, nullable=False)

    category_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("categories.id"),
        nullable=True,
        default=None,
    )

    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )

    category: Mapped[Optional["Category"]] = relationship(back_populates="entries")

    media: Mapped[List["Media"]] = relationship(
        back_populates="entry",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    comments: Mapped[List["Comment"]] = relationship(
        back_populates="entry",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    # Listing is always ORDER BY date DESC; a btree index serves both directions
    __table_args__ = (
        Index("idx_entries_date", "date"),
    )

    def __repr__(self) -> str:
        return f"<Entry(id={self.id}, title='{self.title}', date='{self.date}')>"
