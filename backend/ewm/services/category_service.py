"""Category Service — admin CRUD and public reads for categories.

Invariants:
    - Category names are unique (ConflictError)
    - A category referenced by any event cannot be deleted
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ewm.core.errors import ConflictError, RequestConditionError
from ewm.core.pagination import make_page
from ewm.models import Category, Event
from ewm.schemas.category import CategoryDto, NewCategoryDto
from ewm.services.lookups import get_category_or_404
from ewm.services.mappers import to_category_dto

logger = logging.getLogger(__name__)


class CategoryService:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _check_name_free(self, name: str, exclude_id: int | None = None) -> None:
        query = select(Category.id).where(func.lower(Category.name) == name.lower())
        if exclude_id is not None:
            query = query.where(Category.id != exclude_id)
        result = await self.db.execute(query)
        if result.first() is not None:
            raise ConflictError(f"Category '{name}' already exists")

    async def add_category(self, body: NewCategoryDto) -> CategoryDto:
        await self._check_name_free(body.name)
        category = Category(name=body.name)
        self.db.add(category)
        await self.db.commit()
        logger.info(f"Category {category.id} '{category.name}' created")
        return to_category_dto(category)

    async def update_category(self, body: CategoryDto) -> CategoryDto:
        category = await get_category_or_404(self.db, body.id)
        await self._check_name_free(body.name, exclude_id=body.id)
        category.name = body.name
        await self.db.commit()
        logger.info(f"Category {category.id} renamed to '{category.name}'")
        return to_category_dto(category)

    async def delete_category(self, cat_id: int) -> None:
        category = await get_category_or_404(self.db, cat_id)
        result = await self.db.execute(
            select(func.count(Event.id)).where(Event.category_id == cat_id),
        )
        if result.scalar_one() > 0:
            raise RequestConditionError("The category is not empty")
        await self.db.delete(category)
        await self.db.commit()
        logger.info(f"Category {cat_id} deleted")

    async def get_categories(self, from_: int, size: int) -> list[CategoryDto]:
        page = make_page(from_, size)
        result = await self.db.execute(
            select(Category).order_by(Category.id)
            .offset(page.offset).limit(page.limit)
        )
        return [to_category_dto(c) for c in result.scalars().all()]

    async def get_category(self, cat_id: int) -> CategoryDto:
        return to_category_dto(await get_category_or_404(self.db, cat_id))
