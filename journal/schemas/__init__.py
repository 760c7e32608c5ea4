from journal.schemas.category import CategoryCreate, CategoryResponse
from journal.schemas.comment import CommentCreate, CommentResponse
from journal.schemas.common import ErrorResponse, HealthResponse, MessageResponse
from journal.schemas.entry import EntryResponse, EntryWithCategory, EntryWrite
from journal.schemas.media import MediaResponse

__all__ = [
    "CategoryCreate",
    "CategoryResponse",
    "CommentCreate",
    "CommentResponse",
    "EntryResponse",
    "EntryWithCategory",
    "EntryWrite",
    "ErrorResponse",
    "HealthResponse",
    "MediaResponse",
    "MessageResponse",
]
