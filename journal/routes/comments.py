"""
Journal Backend — Comment Route Handlers
==========================================

    GET    /api/entries/{entry_id}/comments
    POST   /api/entries/{entry_id}/comments
    DELETE /api/comments/{comment_id}
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from journal.database import get_db_session
from journal.repositories.comment_repository import comment_repository
from journal.schemas.comment import CommentCreate, CommentResponse
from journal.schemas.common import ErrorResponse, MessageResponse

router = APIRouter(prefix="/api", tags=["Comments"])


@router.get(
    "/entries/{entry_id}/comments",
    response_model=List[CommentResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List the comments of an entry, newest first",
)
async def list_comments(
    entry_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> List[CommentResponse]:
    return await comment_repository.list_comments(db, entry_id)


@router.post(
    "/entries/{entry_id}/comments",
    response_model=CommentResponse,
    responses={
        400: {"description": "Missing content or author", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Add a comment to an entry",
)
async def create_comment(
    entry_id: int,
    payload: CommentCreate,
    db: AsyncSession = Depends(get_db_session),
) -> CommentResponse:
    return await comment_repository.create_comment(db, entry_id, payload)


@router.delete(
    "/comments/{comment_id}",
    response_model=MessageResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Delete a comment",
)
async def delete_comment(
    comment_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await comment_repository.delete_comment(db, comment_id)
