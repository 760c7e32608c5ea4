"""
Journal Backend — Category Repository
=======================================

What:  List (by name) and create categories. Categories are never updated
       or deleted through the API.
"""

import logging
from typing import List

from sqlalchemy import asc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from journal.database import utcnow
from journal.exceptions import StoreError
from journal.models import Category
from journal.schemas.category import CategoryCreate, CategoryResponse

logger = logging.getLogger(__name__)


class CategoryRepository:

    async def list_categories(self, db: AsyncSession) -> List[CategoryResponse]:
        """All categories in ascending name order, whatever the insertion order."""
        try:
            result = await db.execute(
                select(Category).order_by(asc(Category.name), asc(Category.id))
            )
            return [CategoryResponse.model_validate(c) for c in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error("Database error listing categories: %s", str(e), exc_info=True)
            raise StoreError(
                message="Erreur lors de la récupération des catégories",
                context={"error_type": type(e).__name__},
            )

    async def create_category(self, db: AsyncSession, data: CategoryCreate) -> CategoryResponse:
        category = Category(
            name=data.name,
            description=data.description,
            created_at=utcnow(),
        )

        try:
            db.add(category)
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error creating category: %s", str(e))
            raise StoreError(
                message="Erreur lors de la création de la catégorie",
                context={"error_type": type(e).__name__},
            )

        logger.info("Category created: %s (%s)", category.id, category.name)
        return CategoryResponse.model_validate(category)


category_repository = CategoryRepository()
