"""Private Requests — a user's own participation requests."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ewm.infrastructure.database import get_db
from ewm.schemas.request import ParticipationRequestDto
from ewm.services.participation_service import ParticipationService

router = APIRouter(prefix="/users", tags=["private: requests"])


@router.get("/{user_id}/requests", response_model=list[ParticipationRequestDto])
async def get_user_requests(user_id: int, db: AsyncSession = Depends(get_db)):
    return await ParticipationService(db).get_user_requests(user_id)


@router.post(
    "/{user_id}/requests", response_model=ParticipationRequestDto,
    status_code=status.HTTP_201_CREATED,
)
async def add_request(
    user_id: int,
    event_id: int = Query(..., gt=0, alias="eventId"),
    group: str | None = Query(None, min_length=1, max_length=50),
    db: AsyncSession = Depends(get_db),
):
    return await ParticipationService(db).add_request(user_id, event_id, group)


@router.patch(
    "/{user_id}/requests/{request_id}/cancel",
    response_model=ParticipationRequestDto,
)
async def cancel_request(
    user_id: int, request_id: int, db: AsyncSession = Depends(get_db),
):
    return await ParticipationService(db).cancel_request(user_id, request_id)
