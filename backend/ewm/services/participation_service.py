"""Participation Service — a user's requests to take part in other users' events.

Invariants:
    - One request per (event, requester): duplicates are a ConflictError
    - The request is tagged with one of the requester's groups (FRIENDS_ALL by default);
      the tag decides which friends later see this participation
    - Confirmed-at-once requests occupy a seat immediately
    - Canceling a CONFIRMED request releases its seat
    - The event row is locked while its seats are counted
"""

import logging
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ewm.core.domain_types import EventState, RequestStatus, FRIENDS_ALL_GROUP
from ewm.core.enforce_participation import check_can_request, initial_status
from ewm.core.errors import (
    ConflictError, ParticipationRequestNotFoundError, RequestConditionError,
)
from ewm.models import ParticipationRequest
from ewm.schemas.request import ParticipationRequestDto
from ewm.services.lookups import get_event_or_404, get_group_or_404, get_user_or_404
from ewm.services.mappers import to_request_dto

logger = logging.getLogger(__name__)


class ParticipationService:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_user_requests(self, user_id: int) -> list[ParticipationRequestDto]:
        await get_user_or_404(self.db, user_id)
        result = await self.db.execute(
            select(ParticipationRequest)
            .where(ParticipationRequest.requester_id == user_id)
            .order_by(ParticipationRequest.id)
        )
        return [to_request_dto(r) for r in result.scalars().all()]

    async def add_request(
        self, user_id: int, event_id: int, group: str | None = None,
    ) -> ParticipationRequestDto:
        await get_user_or_404(self.db, user_id)
        event = await get_event_or_404(self.db, event_id, for_update=True)

        existing = await self.db.execute(
            select(ParticipationRequest.id)
            .where(ParticipationRequest.event_id == event_id)
            .where(ParticipationRequest.requester_id == user_id)
        )
        if existing.first() is not None:
            raise ConflictError("Participation request has already been sent")

        check_can_request(
            user_id, event.initiator_id, EventState(event.state),
            event.participant_limit, event.confirmed_requests,
        )
        tag = await get_group_or_404(self.db, user_id, group or FRIENDS_ALL_GROUP)

        status = initial_status(event.request_moderation, event.participant_limit)
        request = ParticipationRequest(
            event_id=event_id,
            requester_id=user_id,
            group=tag,
            status=status.value,
            created=datetime.now(),
        )
        if status == RequestStatus.CONFIRMED:
            event.confirmed_requests += 1
        self.db.add(request)
        await self.db.commit()

        logger.info(
            f"Request {request.id} to event {event_id} created with status {status.value}",
            extra={"user_id": user_id, "event_id": event_id},
        )
        return to_request_dto(request)

    async def cancel_request(
        self, user_id: int, request_id: int,
    ) -> ParticipationRequestDto:
        await get_user_or_404(self.db, user_id)
        result = await self.db.execute(
            select(ParticipationRequest)
            .where(ParticipationRequest.id == request_id)
            .where(ParticipationRequest.requester_id == user_id)
        )
        request = result.scalar_one_or_none()
        if request is None:
            raise ParticipationRequestNotFoundError(request_id)

        status = RequestStatus(request.status)
        if status == RequestStatus.CANCELED:
            raise RequestConditionError("Request is already canceled")
        if status == RequestStatus.CONFIRMED:
            event = await get_event_or_404(self.db, request.event_id, for_update=True)
            event.confirmed_requests = max(event.confirmed_requests - 1, 0)

        request.status = RequestStatus.CANCELED.value
        await self.db.commit()
        logger.info(
            f"Request {request_id} canceled by requester",
            extra={"user_id": user_id, "event_id": request.event_id},
        )
        return to_request_dto(request)
