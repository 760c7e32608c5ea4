"""
Journal Backend — File Storage Service
========================================

What:  Writes uploaded media to the upload directory, removes it again, and
       resolves stored names for serving.
How:   Every stored file gets a UUID4 name plus the original extension; the
       server-relative access path is `/uploads/<name>`. Writes go through
       aiofiles so the event loop is never blocked on disk I/O.
Who:   Constructed by create_app() from settings and kept on
       `app.state.file_service`; injected into routes via get_file_service.

Directory Structure:
    uploads/
    ├── 3f0c5a0e-7f0e-4c1e-9d8b-3a1b2c4d5e6f.png
    └── a1b2c3d4-5678-4abc-9def-0123456789ab.pdf

Attack vectors prevented:
    - Path traversal: stored names contain no user input; `resolve()` refuses
      anything that escapes the upload directory
    - Filename collision: UUID4 names are unique even under concurrency
    - Oversized uploads: checked against MAX_FILE_SIZE before writing
"""

import logging
import os
import uuid
from pathlib import Path
from typing import Optional, Tuple

import aiofiles
from fastapi import Request

from journal.exceptions import FileStorageError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

UPLOADS_URL_PREFIX = "/uploads"


class FileService:
    """
    Manages the lifecycle of uploaded media files.

    Lifecycle of an uploaded file:
        1. MediaRepository.create_media() → validate_size()
        2. store_file() writes bytes to <upload_dir>/<uuid><ext>
        3. The returned URL is recorded on the media row
        4. cleanup_file() removes the file if the row insert fails,
           or after the media row is deleted
    """

    def __init__(self, upload_dir: str, max_file_size: int):
        self.upload_dir = Path(upload_dir).resolve()
        self.max_file_size = max_file_size
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        logger.info("FileService initialized with upload_dir=%s", self.upload_dir)

    def validate_size(self, content_length: Optional[int], actual_size: int) -> None:
        """
        Validate file size against the configured maximum.

        Args:
            content_length: Size reported by the client (may be None or inaccurate)
            actual_size: Actual byte count of the uploaded file

        Raises:
            ValidationError with a human-readable size limit message
        """
        max_mb = self.max_file_size / (1024 * 1024)

        if content_length and content_length > self.max_file_size:
            raise ValidationError(
                message=f"Le fichier dépasse la taille maximale de {max_mb:.0f} Mo",
                field="file",
                context={"max_size_mb": max_mb, "reported_size": content_length},
            )

        if actual_size > self.max_file_size:
            raise ValidationError(
                message=(
                    f"Le fichier ({actual_size / (1024 * 1024):.1f} Mo) dépasse "
                    f"la taille maximale de {max_mb:.0f} Mo"
                ),
                field="file",
                context={"max_size_mb": max_mb, "actual_size": actual_size},
            )

    @staticmethod
    def generate_name(original_filename: Optional[str]) -> str:
        """UUID4 plus the original (lower-cased) extension, e.g. `<uuid>.png`."""
        extension = Path(original_filename or "").suffix.lower()
        return f"{uuid.uuid4()}{extension}"

    async def store_file(self, content: bytes, original_filename: Optional[str]) -> Tuple[str, str]:
        """
        Write file content to the upload directory.

        Returns:
            Tuple of (absolute_path, url) where url is `/uploads/<name>`.

        Raises:
            FileStorageError if the directory or the write fails.
        """
        name = self.generate_name(original_filename)
        absolute_path = self.upload_dir / name

        try:
            self.upload_dir.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(absolute_path, "wb") as f:
                await f.write(content)
        except OSError as e:
            logger.error("Failed to store file at %s: %s", absolute_path, str(e))
            raise FileStorageError(
                message="Erreur lors du téléchargement du média",
                context={"path": str(absolute_path), "os_error": str(e)},
            )

        logger.info("File stored: %s (%d bytes)", name, len(content))
        return str(absolute_path), f"{UPLOADS_URL_PREFIX}/{name}"

    def path_for_url(self, url: str) -> Optional[Path]:
        """Map a recorded `/uploads/<name>` URL back to its file path."""
        prefix = f"{UPLOADS_URL_PREFIX}/"
        if not url.startswith(prefix):
            return None
        try:
            return self.resolve(url[len(prefix):])
        except (ValidationError, NotFoundError):
            return None

    def resolve(self, name: str) -> Path:
        """
        Resolve a stored file name to its path inside the upload directory.

        Raises:
            ValidationError if the name escapes the upload directory
            NotFoundError if no such file exists
        """
        full_path = (self.upload_dir / name).resolve()

        if full_path.parent != self.upload_dir:
            raise ValidationError(message="Chemin de fichier invalide", field="file")

        if not full_path.is_file():
            raise NotFoundError(
                message="Fichier non trouvé",
                resource="upload",
                resource_id=name,
            )

        return full_path

    async def cleanup_file(self, file_path: str) -> None:
        """
        Remove a file from storage (best effort).

        When:    After a failed media insert, and after a media row is deleted.
        Missing files are ignored; other failures are logged, not raised.
        """
        try:
            path = Path(file_path)
            if path.exists():
                os.remove(path)
                logger.info("Cleaned up file: %s", path.name)
            else:
                logger.debug("Cleanup: file already gone: %s", path.name)
        except OSError as e:
            logger.warning("Failed to clean up file %s: %s", file_path, str(e))


def get_file_service(request: Request) -> FileService:
    """FastAPI dependency returning the application's FileService."""
    return request.app.state.file_service
