"""Admin Users — user registration and removal by administrators."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ewm.infrastructure.database import get_db
from ewm.schemas.user import NewUserRequest, UserDto
from ewm.services.user_service import UserService

router = APIRouter(prefix="/admin/users", tags=["admin: users"])


@router.post("", response_model=UserDto, status_code=status.HTTP_201_CREATED)
async def add_user(body: NewUserRequest, db: AsyncSession = Depends(get_db)):
    return await UserService(db).add_user(body)


@router.get("", response_model=list[UserDto])
async def get_users(
    ids: list[int] | None = Query(None),
    from_: int = Query(0, ge=0, alias="from"),
    size: int = Query(10, gt=0),
    db: AsyncSession = Depends(get_db),
):
    return await UserService(db).get_users(ids, from_, size)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: int, db: AsyncSession = Depends(get_db)):
    await UserService(db).delete_user(user_id)
