"""Admin Categories — category curation."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ewm.infrastructure.database import get_db
from ewm.schemas.category import CategoryDto, NewCategoryDto
from ewm.services.category_service import CategoryService

router = APIRouter(prefix="/admin/categories", tags=["admin: categories"])


@router.post("", response_model=CategoryDto, status_code=status.HTTP_201_CREATED)
async def add_category(body: NewCategoryDto, db: AsyncSession = Depends(get_db)):
    return await CategoryService(db).add_category(body)


@router.patch("", response_model=CategoryDto)
async def update_category(body: CategoryDto, db: AsyncSession = Depends(get_db)):
    return await CategoryService(db).update_category(body)


@router.delete("/{cat_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(cat_id: int, db: AsyncSession = Depends(get_db)):
    await CategoryService(db).delete_category(cat_id)
