"""
Journal Backend — Media Route Handlers
========================================

What:  List, upload and delete media attached to an entry.

Request Flow (upload):
    1. Client sends multipart/form-data with a single 'file' field
    2. The file part is read into memory (the transport already bounds it)
    3. MediaRepository validates, classifies, stores the file and the row
    4. 200 with the created media row

A request without a 'file' part gets 400 "Aucun fichier n'a été téléchargé".
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from journal.database import get_db_session
from journal.repositories.media_repository import media_repository
from journal.schemas.common import ErrorResponse, MessageResponse
from journal.schemas.media import MediaResponse
from journal.services.file_service import FileService, get_file_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Media"])


@router.get(
    "/entries/{entry_id}/media",
    response_model=List[MediaResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List the media of an entry, newest first",
)
async def list_media(
    entry_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> List[MediaResponse]:
    return await media_repository.list_media(db, entry_id)


@router.post(
    "/entries/{entry_id}/media",
    response_model=MediaResponse,
    responses={
        400: {"description": "No file or file too large", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Upload a media file for an entry",
)
async def upload_media(
    entry_id: int,
    file: Optional[UploadFile] = File(default=None, description="Image, video, PDF or any other file"),
    db: AsyncSession = Depends(get_db_session),
    file_service: FileService = Depends(get_file_service),
) -> MediaResponse:
    if file is None:
        return await media_repository.create_media(
            db, file_service, entry_id, filename=None, content_type=None, content=None
        )

    try:
        content = await file.read()
        logger.info(
            "Received upload for entry %s: filename=%s, type=%s, size=%d bytes",
            entry_id,
            file.filename or "unknown",
            file.content_type,
            len(content),
        )
        return await media_repository.create_media(
            db,
            file_service,
            entry_id,
            filename=file.filename,
            content_type=file.content_type,
            content=content,
            content_length=file.size,
        )
    finally:
        await file.close()


@router.delete(
    "/media/{media_id}",
    response_model=MessageResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Delete a media row and its stored file",
)
async def delete_media(
    media_id: int,
    db: AsyncSession = Depends(get_db_session),
    file_service: FileService = Depends(get_file_service),
) -> MessageResponse:
    return await media_repository.delete_media(db, file_service, media_id)
