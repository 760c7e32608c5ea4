"""
Journal Backend — Entry Route Handlers
========================================

What:  /api/entries list, detail, create, update and delete.
How:   Each handler parses path/body, calls exactly one EntryRepository
       method and returns its response model. Path ids are integers; a
       non-numeric id is rejected with 400 before the repository is reached.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from journal.database import get_db_session
from journal.repositories.entry_repository import entry_repository
from journal.schemas.common import ErrorResponse, MessageResponse
from journal.schemas.entry import EntryResponse, EntryWithCategory, EntryWrite

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Entries"])


@router.get(
    "/entries",
    response_model=List[EntryWithCategory],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List every entry, newest first",
)
async def list_entries(db: AsyncSession = Depends(get_db_session)) -> List[EntryWithCategory]:
    return await entry_repository.list_entries(db)


@router.get(
    "/entries/{entry_id}",
    response_model=EntryWithCategory,
    responses={
        400: {"description": "Invalid id", "model": ErrorResponse},
        404: {"description": "Entry not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a single entry with its category",
)
async def get_entry(
    entry_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> EntryWithCategory:
    return await entry_repository.get_entry(db, entry_id)


@router.post(
    "/entries",
    response_model=EntryResponse,
    responses={
        400: {"description": "Missing title or content", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create an entry",
)
async def create_entry(
    payload: EntryWrite,
    db: AsyncSession = Depends(get_db_session),
) -> EntryResponse:
    return await entry_repository.create_entry(db, payload)


@router.patch(
    "/entries/{entry_id}",
    response_model=EntryResponse,
    responses={
        400: {"description": "Invalid id or missing field", "model": ErrorResponse},
        404: {"description": "Entry not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Replace title, content and category of an entry",
)
async def update_entry(
    entry_id: int,
    payload: EntryWrite,
    db: AsyncSession = Depends(get_db_session),
) -> EntryResponse:
    return await entry_repository.update_entry(db, entry_id, payload)


@router.delete(
    "/entries/{entry_id}",
    response_model=MessageResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Delete an entry with its media and comments",
)
async def delete_entry(
    entry_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await entry_repository.delete_entry(db, entry_id)
