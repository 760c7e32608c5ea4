"""
Journal Backend — Media Repository
====================================

What:  List, upload and delete media files attached to an entry.
How:   Combines one FileService call with one store operation per request.

Upload Flow (POST /api/entries/{entryId}/media):
    ┌──────────┐    ┌──────────────┐    ┌──────────────┐    ┌──────────────┐
    │  Upload  │───▶│ Size check + │───▶│  Write file  │───▶│ Insert media │
    │  (Route) │    │ classify MIME│    │ (FileService)│    │     row      │
    └──────────┘    └──────────────┘    └──────────────┘    └──────────────┘

    Insert fails → the file just written is removed again, then StoreError.

Delete Flow (DELETE /api/media/{id}):
    Row is deleted first; the stored file is removed afterwards, best effort.
    Files belonging to media rows removed by an entry cascade are not touched.
"""

import logging
from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from journal.database import utcnow
from journal.exceptions import StoreError, ValidationError
from journal.models import Media
from journal.schemas.common import MessageResponse
from journal.schemas.media import MediaResponse
from journal.services.file_service import FileService

logger = logging.getLogger(__name__)


def classify_media_type(mime_type: Optional[str]) -> str:
    """
    Map an upload MIME type onto the stored media type.

        image/*          → "image"
        video/*          → "video"
        application/pdf  → "pdf"
        anything else    → "other"
    """
    mime = (mime_type or "").strip().lower()
    if mime.startswith("image/"):
        return "image"
    if mime.startswith("video/"):
        return "video"
    if mime == "application/pdf":
        return "pdf"
    return "other"


class MediaRepository:

    async def list_media(self, db: AsyncSession, entry_id: int) -> List[MediaResponse]:
        """Media of one entry, newest first."""
        try:
            result = await db.execute(
                select(Media)
                .where(Media.entry_id == entry_id)
                .order_by(desc(Media.created_at), desc(Media.id))
            )
            return [MediaResponse.model_validate(m) for m in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error("Database error listing media of entry %s: %s", entry_id, str(e))
            raise StoreError(
                message="Erreur lors de la récupération des médias",
                context={"entry_id": entry_id, "error_type": type(e).__name__},
            )

    async def create_media(
        self,
        db: AsyncSession,
        file_service: FileService,
        entry_id: int,
        filename: Optional[str],
        content_type: Optional[str],
        content: Optional[bytes],
        content_length: Optional[int] = None,
    ) -> MediaResponse:
        """
        Store an uploaded file and record it against an entry.

        Args:
            filename: Original client filename (only its extension is kept)
            content_type: MIME type declared for the file part
            content: File bytes, or None when the request carried no file

        Raises:
            ValidationError: no file, or file larger than MAX_FILE_SIZE (→ 400)
            FileStorageError: the file could not be written (→ 500)
            StoreError: the row insert failed, e.g. unknown entry (→ 500)
        """
        if content is None:
            raise ValidationError(message="Aucun fichier n'a été téléchargé", field="file")

        file_service.validate_size(content_length, len(content))

        media_type = classify_media_type(content_type)
        absolute_path, url = await file_service.store_file(content, filename)

        media = Media(
            entry_id=entry_id,
            type=media_type,
            url=url,
            created_at=utcnow(),
        )

        try:
            db.add(media)
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error recording media for entry %s: %s", entry_id, str(e))
            await file_service.cleanup_file(absolute_path)
            raise StoreError(
                message="Erreur lors du téléchargement du média",
                context={"entry_id": entry_id, "error_type": type(e).__name__},
            )

        logger.info(
            "Media %s stored for entry %s (type=%s, mime=%s)",
            media.id,
            entry_id,
            media_type,
            content_type,
        )
        return MediaResponse.model_validate(media)

    async def delete_media(
        self,
        db: AsyncSession,
        file_service: FileService,
        media_id: int,
    ) -> MessageResponse:
        """Delete a media row and its stored file; succeeds even if the row is absent."""
        try:
            media = await db.get(Media, media_id)
            url = media.url if media is not None else None
            if media is not None:
                await db.delete(media)
                await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error deleting media %s: %s", media_id, str(e))
            raise StoreError(
                message="Erreur lors de la suppression du média",
                context={"media_id": media_id, "error_type": type(e).__name__},
            )

        if url:
            path = file_service.path_for_url(url)
            if path is not None:
                await file_service.cleanup_file(str(path))

        return MessageResponse(message="Média supprimé avec succès")


media_repository = MediaRepository()
