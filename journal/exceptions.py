"""
Journal Backend — Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the error scenarios of the API.
How:   Each exception carries a user-facing French `message` and an optional
       `context` dict. Global exception handlers (registered in main.py)
       turn them into `{"message": ...}` JSON bodies with the right status.
Who:   Raised by repositories, the file service and route helpers.

Exception Hierarchy:
    JournalError (base)            → 500
    ├── ValidationError            → 400 Bad Request (client can fix)
    ├── NotFoundError              → 404 Not Found
    └── StoreError                 → 500 Internal Server Error
        └── FileStorageError       → 500 Internal Server Error

`context` is logged server-side only; it never appears in a response body.
"""

from typing import Any, Dict, Optional


class JournalError(Exception):
    """
    Base exception for all journal application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "Erreur interne du serveur",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(JournalError):
    """
    Raised when client input fails validation.

    When:    Missing or empty required field, missing upload, oversized upload.
    HTTP:    400 Bad Request
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Données invalides",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(JournalError):
    """
    Raised when a requested resource does not exist.

    When:    GET /api/entries/{id} (or PATCH) with an id that matches no row,
             or a request for an upload that is not on disk.
    HTTP:    404 Not Found
    """

    status_code = 404

    def __init__(
        self,
        message: str = "Ressource non trouvée",
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = str(resource_id)
        super().__init__(message=message, context=ctx)


class StoreError(JournalError):
    """
    Raised when the persistence layer fails unexpectedly.

    When:    Connection lost, constraint violation (e.g. unknown entryId or
             categoryId), deadlock, etc.
    HTTP:    500 Internal Server Error

    The message is the operation-level French text
    (e.g. "Erreur lors de la création de l'entrée"); SQL details stay in
    the server log via `context`.
    """

    def __init__(
        self,
        message: str = "Erreur lors de l'accès aux données",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class FileStorageError(StoreError):
    """
    Raised when file system operations on the upload directory fail.

    When:    Disk full, permission denied, directory not writable, I/O error.
    HTTP:    500 Internal Server Error
    """

    def __init__(
        self,
        message: str = "Erreur lors de l'enregistrement du fichier",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
