"""
Journal Backend — Category SQLAlchemy Model
=============================================

What:  ORM model for the `categories` table.
Who:   Read and written by CategoryRepository; joined into entries on read.

Categories are created through the API and never updated or deleted by it,
so no cascade is declared towards the entries that reference them.
"""

from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import DateTime, Index, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from journal.database import Base, utcnow

if TYPE_CHECKING:
    from journal.models.entry import Entry


class Category(Base):
    """A named tag optionally attached to entries."""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(Text, nullable=False)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default=None)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )

    entries: Mapped[List["Entry"]] = relationship(back_populates="category")

    # Listing is always ORDER BY name ASC
    __table_args__ = (
        Index("idx_categories_name", "name"),
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name='{self.name}')>"
