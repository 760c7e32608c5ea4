"""
Journal Backend — Upload Serving Route
========================================

What:  GET /uploads/{name} returns a stored media file.
How:   FileService.resolve() keeps the lookup inside the upload directory;
       FileResponse guesses the content type from the extension.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from journal.services.file_service import FileService, get_file_service

router = APIRouter(tags=["Uploads"])


@router.get(
    "/uploads/{name}",
    summary="Serve an uploaded media file",
    responses={
        200: {"description": "The stored file"},
        404: {"description": "File not found"},
    },
)
async def serve_upload(
    name: str,
    file_service: FileService = Depends(get_file_service),
) -> FileResponse:
    path = file_service.resolve(name)
    return FileResponse(
        path=str(path),
        headers={"Cache-Control": "public, max-age=86400"},
    )
