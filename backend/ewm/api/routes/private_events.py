"""Private Events — an initiator's own events and the requests made to them.

Also serves the friend/subscriber views of another user's events:
    /users/{followerId}/publishers/{publisherId}/events/participating
    /users/{followerId}/publishers/{publisherId}/events/created
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ewm.api.params import event_filter_params
from ewm.core.event_filter import EventFilter
from ewm.infrastructure.database import get_db
from ewm.schemas.event import EventFullDto, EventShortDto, NewEventDto, UpdateEventRequest
from ewm.schemas.request import ParticipationRequestDto
from ewm.services.private_event_service import PrivateEventService

router = APIRouter(prefix="/users", tags=["private: events"])


# ─── Own events ─────────────────────────────────────────────────

@router.get("/{user_id}/events", response_model=list[EventShortDto])
async def get_events_by_owner(
    user_id: int,
    from_: int = Query(0, ge=0, alias="from"),
    size: int = Query(10, gt=0),
    db: AsyncSession = Depends(get_db),
):
    return await PrivateEventService(db).get_events_by_owner(user_id, from_, size)


@router.post(
    "/{user_id}/events", response_model=EventFullDto,
    status_code=status.HTTP_201_CREATED,
)
async def add_event(user_id: int, body: NewEventDto, db: AsyncSession = Depends(get_db)):
    return await PrivateEventService(db).add_event(user_id, body)


@router.patch("/{user_id}/events", response_model=EventFullDto)
async def update_event(
    user_id: int, body: UpdateEventRequest, db: AsyncSession = Depends(get_db),
):
    return await PrivateEventService(db).update_event(user_id, body)


@router.get("/{user_id}/events/{event_id}", response_model=EventFullDto)
async def get_event(user_id: int, event_id: int, db: AsyncSession = Depends(get_db)):
    return await PrivateEventService(db).get_event(user_id, event_id)


@router.patch("/{user_id}/events/{event_id}", response_model=EventFullDto)
async def cancel_event(user_id: int, event_id: int, db: AsyncSession = Depends(get_db)):
    return await PrivateEventService(db).cancel_event(user_id, event_id)


# ─── Requests to own events ─────────────────────────────────────

@router.get(
    "/{user_id}/events/{event_id}/requests",
    response_model=list[ParticipationRequestDto],
)
async def get_event_requests(
    user_id: int, event_id: int, db: AsyncSession = Depends(get_db),
):
    return await PrivateEventService(db).get_event_requests(user_id, event_id)


@router.patch(
    "/{user_id}/events/{event_id}/requests/{req_id}/confirm",
    response_model=ParticipationRequestDto,
)
async def confirm_request(
    user_id: int, event_id: int, req_id: int, db: AsyncSession = Depends(get_db),
):
    return await PrivateEventService(db).confirm_request(user_id, event_id, req_id)


@router.patch(
    "/{user_id}/events/{event_id}/requests/{req_id}/reject",
    response_model=ParticipationRequestDto,
)
async def reject_request(
    user_id: int, event_id: int, req_id: int, db: AsyncSession = Depends(get_db),
):
    return await PrivateEventService(db).reject_request(user_id, event_id, req_id)


# ─── Events of a followed user ──────────────────────────────────

@router.get(
    "/{follower_id}/publishers/{publisher_id}/events/participating",
    response_model=list[EventFullDto],
)
async def get_events_where_participant(
    follower_id: int,
    publisher_id: int,
    f: EventFilter = Depends(event_filter_params),
    db: AsyncSession = Depends(get_db),
):
    return await PrivateEventService(db).get_events_where_participant(
        follower_id, publisher_id, f,
    )


@router.get(
    "/{follower_id}/publishers/{publisher_id}/events/created",
    response_model=list[EventFullDto],
)
async def get_events_where_creator(
    follower_id: int,
    publisher_id: int,
    f: EventFilter = Depends(event_filter_params),
    db: AsyncSession = Depends(get_db),
):
    return await PrivateEventService(db).get_events_where_creator(
        follower_id, publisher_id, f,
    )
