"""
Journal Backend — Entry Repository
====================================

What:  CRUD over the `entries` table, with the category joined on reads.
How:   Each method performs exactly one store operation on the session it
       is given and returns a Pydantic response model.
Who:   Called by the /api/entries route handlers.

Query plans:
    list:    SELECT ... FROM entries ORDER BY date DESC, id DESC
             (+ one SELECT ... FROM categories WHERE id IN (...) via selectinload)
    get:     SELECT ... FROM entries WHERE id = :id (+ category)
    delete:  DELETE FROM entries WHERE id = :id
             → media and comments go with it (ON DELETE CASCADE)

Error Handling Strategy:
    SQLAlchemy failures are logged with context and re-raised as StoreError
    carrying the operation's French message. A missing row on get/update
    raises NotFoundError. Delete never reports a missing row.
"""

import logging
from datetime import timedelta
from typing import List

from sqlalchemy import delete, desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from journal.database import as_utc, utcnow
from journal.exceptions import NotFoundError, StoreError
from journal.models import Entry
from journal.schemas.common import MessageResponse
from journal.schemas.entry import EntryResponse, EntryWithCategory, EntryWrite

logger = logging.getLogger(__name__)

ENTRY_NOT_FOUND = "Entrée non trouvée"


class EntryRepository:
    """
    Data access for journal entries.

    Responsibilities:
        - list_entries(): every entry, newest first, with its category
        - get_entry(): one entry with its category, or NotFoundError
        - create_entry(): insert with date == updated_at == now
        - update_entry(): full replace of title/content/categoryId, bump updated_at
        - delete_entry(): idempotent delete, cascading to media and comments
    """

    async def list_entries(self, db: AsyncSession) -> List[EntryWithCategory]:
        try:
            result = await db.execute(
                select(Entry)
                .options(selectinload(Entry.category))
                .order_by(desc(Entry.date), desc(Entry.id))
            )
            entries = result.scalars().all()
            return [EntryWithCategory.model_validate(entry) for entry in entries]

        except SQLAlchemyError as e:
            logger.error("Database error listing entries: %s", str(e), exc_info=True)
            raise StoreError(
                message="Erreur lors de la récupération des entrées",
                context={"error_type": type(e).__name__},
            )

    async def get_entry(self, db: AsyncSession, entry_id: int) -> EntryWithCategory:
        """
        Retrieve a single entry with its joined category.

        Raises:
            NotFoundError: no entry has this id (→ 404)
            StoreError: query execution failed (→ 500)
        """
        try:
            result = await db.execute(
                select(Entry)
                .options(selectinload(Entry.category))
                .where(Entry.id == entry_id)
            )
            entry = result.scalar_one_or_none()

        except SQLAlchemyError as e:
            logger.error("Database error fetching entry %s: %s", entry_id, str(e))
            raise StoreError(
                message="Erreur lors de la récupération de l'entrée",
                context={"entry_id": entry_id, "error_type": type(e).__name__},
            )

        if entry is None:
            raise NotFoundError(message=ENTRY_NOT_FOUND, resource="entry", resource_id=entry_id)

        return EntryWithCategory.model_validate(entry)

    async def create_entry(self, db: AsyncSession, data: EntryWrite) -> EntryResponse:
        """
        Insert a new entry.

        `date` and `updated_at` receive the same instant; a falsy categoryId
        is stored as NULL. An unknown categoryId violates the foreign key and
        surfaces as StoreError.
        """
        now = utcnow()
        entry = Entry(
            title=data.title,
            content=data.content,
            category_id=data.category_id or None,
            date=now,
            updated_at=now,
        )

        try:
            db.add(entry)
            # Committed here so the row is durable before the response is written
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error creating entry: %s", str(e))
            raise StoreError(
                message="Erreur lors de la création de l'entrée",
                context={"category_id": data.category_id, "error_type": type(e).__name__},
            )

        logger.info("Entry created: %s", entry.id)
        return EntryResponse.model_validate(entry)

    async def update_entry(self, db: AsyncSession, entry_id: int, data: EntryWrite) -> EntryResponse:
        """
        Replace title, content and categoryId of an existing entry.

        `date` is left untouched. `updated_at` is set to now, and is always
        strictly later than its previous value even if the clock has not
        advanced since the last write.

        Raises:
            NotFoundError: no entry has this id
            StoreError: the read or the write failed
        """
        try:
            entry = await db.get(Entry, entry_id)
        except SQLAlchemyError as e:
            logger.error("Database error loading entry %s for update: %s", entry_id, str(e))
            raise StoreError(
                message="Erreur lors de la mise à jour de l'entrée",
                context={"entry_id": entry_id, "error_type": type(e).__name__},
            )

        if entry is None:
            raise NotFoundError(message=ENTRY_NOT_FOUND, resource="entry", resource_id=entry_id)

        now = utcnow()
        previous = as_utc(entry.updated_at)
        if now <= previous:
            now = previous + timedelta(microseconds=1)

        entry.title = data.title
        entry.content = data.content
        entry.category_id = data.category_id or None
        entry.updated_at = now

        try:
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error updating entry %s: %s", entry_id, str(e))
            raise StoreError(
                message="Erreur lors de la mise à jour de l'entrée",
                context={"entry_id": entry_id, "error_type": type(e).__name__},
            )

        logger.info("Entry updated: %s", entry_id)
        return EntryResponse.model_validate(entry)

    async def delete_entry(self, db: AsyncSession, entry_id: int) -> MessageResponse:
        """
        Delete an entry and, through the cascade, its media and comments.

        Succeeds whether or not the row existed. Stored files of the
        cascaded media rows are left on disk.
        """
        try:
            result = await db.execute(delete(Entry).where(Entry.id == entry_id))
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error deleting entry %s: %s", entry_id, str(e))
            raise StoreError(
                message="Erreur lors de la suppression de l'entrée",
                context={"entry_id": entry_id, "error_type": type(e).__name__},
            )

        logger.info("Entry delete: id=%s rows=%s", entry_id, result.rowcount)
        return MessageResponse(message="Entrée supprimée avec succès")


entry_repository = EntryRepository()
