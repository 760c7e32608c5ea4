"""
Journal Backend — Comment Repository
======================================

What:  List, create and delete comments attached to an entry.

Notes:
    - Listing an unknown entry returns an empty list (no existence check).
    - Creating a comment on an unknown entry violates the foreign key → StoreError.
    - Deletion is by comment id only, not scoped to an entry, and succeeds
      whether or not the row existed.
"""

import logging
from typing import List

from sqlalchemy import delete, desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from journal.database import utcnow
from journal.exceptions import StoreError
from journal.models import Comment
from journal.schemas.comment import CommentCreate, CommentResponse
from journal.schemas.common import MessageResponse

logger = logging.getLogger(__name__)


class CommentRepository:

    async def list_comments(self, db: AsyncSession, entry_id: int) -> List[CommentResponse]:
        """Comments of one entry, newest first."""
        try:
            result = await db.execute(
                select(Comment)
                .where(Comment.entry_id == entry_id)
                .order_by(desc(Comment.created_at), desc(Comment.id))
            )
            return [CommentResponse.model_validate(c) for c in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error("Database error listing comments of entry %s: %s", entry_id, str(e))
            raise StoreError(
                message="Erreur lors de la récupération des commentaires",
                context={"entry_id": entry_id, "error_type": type(e).__name__},
            )

    async def create_comment(
        self,
        db: AsyncSession,
        entry_id: int,
        data: CommentCreate,
    ) -> CommentResponse:
        comment = Comment(
            entry_id=entry_id,
            content=data.content,
            author_name=data.author_name,
            created_at=utcnow(),
        )

        try:
            db.add(comment)
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error adding comment to entry %s: %s", entry_id, str(e))
            raise StoreError(
                message="Erreur lors de l'ajout du commentaire",
                context={"entry_id": entry_id, "error_type": type(e).__name__},
            )

        logger.info("Comment %s added to entry %s", comment.id, entry_id)
        return CommentResponse.model_validate(comment)

    async def delete_comment(self, db: AsyncSession, comment_id: int) -> MessageResponse:
        try:
            await db.execute(delete(Comment).where(Comment.id == comment_id))
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error deleting comment %s: %s", comment_id, str(e))
            raise StoreError(
                message="Erreur lors de la suppression du commentaire",
                context={"comment_id": comment_id, "error_type": type(e).__name__},
            )

        return MessageResponse(message="Commentaire supprimé avec succès")


comment_repository = CommentRepository()
