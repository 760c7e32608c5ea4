"""
Journal Backend — Category Route Handlers
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from journal.database import get_db_session
from journal.repositories.category_repository import category_repository
from journal.schemas.category import CategoryCreate, CategoryResponse
from journal.schemas.common import ErrorResponse

router = APIRouter(prefix="/api", tags=["Categories"])


@router.get(
    "/categories",
    response_model=List[CategoryResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List categories by name",
)
async def list_categories(db: AsyncSession = Depends(get_db_session)) -> List[CategoryResponse]:
    return await category_repository.list_categories(db)


@router.post(
    "/categories",
    response_model=CategoryResponse,
    responses={
        400: {"description": "Missing name", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a category",
)
async def create_category(
    payload: CategoryCreate,
    db: AsyncSession = Depends(get_db_session),
) -> CategoryResponse:
    return await category_repository.create_category(db, payload)
