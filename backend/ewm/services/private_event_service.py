"""Private Event Service — an initiator's own events, their requests, and friends' views.

Invariants:
    - Owner-scoped lookups: another user's event looks missing (404), never forbidden
    - New or moved events start at least MIN_HOURS_BEFORE_EVENT ahead
    - Editing a CANCELED event sends it back to PENDING for moderation
    - confirmed_requests never exceeds a non-zero participant_limit
    - When the limit is reached, every remaining PENDING request is REJECTED
    - The event row is locked while seats are counted; the full-event check
      runs before the request's own status is checked
    - Participation history of a user is visible to friends only (non-FOLLOWER group),
      and only for requests tagged with the friend's group or FRIENDS_ALL
    - Published events of a user are visible to any subscriber

Design Decisions:
    - A confirmation attempt on a full event commits the bulk rejection before
      raising, so the waiting list is cleared even though the call fails
"""

import logging
from datetime import datetime

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ewm.config import get_settings
from ewm.core.domain_types import EventState, RequestStatus
from ewm.core.enforce_events import (
    check_event_date, check_owner_can_cancel, check_owner_can_update, is_limit_reached,
)
from ewm.core.enforce_participation import check_can_decide
from ewm.core.enforce_subscriptions import (
    check_friend_access, check_not_self, check_subscriber_access,
    visible_participation_groups,
)
from ewm.core.errors import ParticipationRequestNotFoundError, RequestConditionError
from ewm.core.event_filter import EventFilter
from ewm.core.pagination import make_page
from ewm.models import Event, Follower, FriendshipGroup, ParticipationRequest
from ewm.schemas.event import EventFullDto, EventShortDto, NewEventDto, UpdateEventRequest
from ewm.schemas.request import ParticipationRequestDto
from ewm.services.event_query import apply_event_filter
from ewm.services.lookups import (
    find_or_create_location, get_category_or_404, get_owned_event_or_404, get_user_or_404,
)
from ewm.services.mappers import to_event_full, to_event_short, to_request_dto

logger = logging.getLogger(__name__)


class PrivateEventService:
    """Operations an authenticated user performs on events."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.min_hours_before_event = get_settings().min_hours_before_event

    # ─── Own events ─────────────────────────────────────────────

    async def get_events_by_owner(
        self, user_id: int, from_: int, size: int,
    ) -> list[EventShortDto]:
        await get_user_or_404(self.db, user_id)
        page = make_page(from_, size)
        result = await self.db.execute(
            select(Event)
            .where(Event.initiator_id == user_id)
            .order_by(Event.id)
            .offset(page.offset).limit(page.limit)
        )
        logger.info(f"Events of user {user_id} requested", extra={"user_id": user_id})
        return [to_event_short(e) for e in result.scalars().all()]

    async def add_event(self, user_id: int, body: NewEventDto) -> EventFullDto:
        user = await get_user_or_404(self.db, user_id)
        category = await get_category_or_404(self.db, body.category)
        now = datetime.now()
        check_event_date(body.event_date, now, self.min_hours_before_event)

        location = await find_or_create_location(self.db, body.location)
        event = Event(
            title=body.title,
            annotation=body.annotation,
            description=body.description,
            category=category,
            initiator=user,
            location=location,
            event_date=body.event_date,
            created_on=now,
            paid=body.paid,
            participant_limit=body.participant_limit,
            request_moderation=body.request_moderation,
            state=EventState.PENDING.value,
            confirmed_requests=0,
            views=0,
        )
        self.db.add(event)
        await self.db.commit()

        logger.info(
            f"Event '{event.title}' with id={event.id} created",
            extra={"user_id": user_id, "event_id": event.id},
        )
        return to_event_full(event)

    async def update_event(
        self, user_id: int, body: UpdateEventRequest,
    ) -> EventFullDto:
        event = await get_owned_event_or_404(self.db, user_id, body.event_id)
        category = (
            await get_category_or_404(self.db, body.category)
            if body.category is not None else None
        )
        state = EventState(event.state)
        check_owner_can_update(state)
        if body.event_date is not None:
            check_event_date(body.event_date, datetime.now(), self.min_hours_before_event)

        if category is not None:
            event.category = category
        for name in (
            "annotation", "description", "event_date", "paid",
            "participant_limit", "title",
        ):
            value = getattr(body, name)
            if value is not None:
                setattr(event, name, value)
        if state == EventState.CANCELED:
            event.state = EventState.PENDING.value

        await self.db.commit()
        logger.info(
            f"Event {event.id} updated by owner",
            extra={"user_id": user_id, "event_id": event.id},
        )
        return to_event_full(event)

    async def get_event(self, user_id: int, event_id: int) -> EventFullDto:
        event = await get_owned_event_or_404(self.db, user_id, event_id)
        logger.info(
            f"Event {event_id} requested by owner",
            extra={"user_id": user_id, "event_id": event_id},
        )
        return to_event_full(event)

    async def cancel_event(self, user_id: int, event_id: int) -> EventFullDto:
        await get_user_or_404(self.db, user_id)
        event = await get_owned_event_or_404(self.db, user_id, event_id)
        check_owner_can_cancel(EventState(event.state))
        event.state = EventState.CANCELED.value
        await self.db.commit()
        logger.info(
            f"Event {event_id} canceled by owner",
            extra={"user_id": user_id, "event_id": event_id},
        )
        return to_event_full(event)

    # ─── Requests to own events ─────────────────────────────────

    async def get_event_requests(
        self, user_id: int, event_id: int,
    ) -> list[ParticipationRequestDto]:
        await get_user_or_404(self.db, user_id)
        await get_owned_event_or_404(self.db, user_id, event_id)
        result = await self.db.execute(
            select(ParticipationRequest)
            .where(ParticipationRequest.event_id == event_id)
            .order_by(ParticipationRequest.id)
        )
        return [to_request_dto(r) for r in result.scalars().all()]

    async def _get_event_request(
        self, event_id: int, req_id: int,
    ) -> ParticipationRequest:
        result = await self.db.execute(
            select(ParticipationRequest)
            .where(ParticipationRequest.id == req_id)
            .where(ParticipationRequest.event_id == event_id)
        )
        request = result.scalar_one_or_none()
        if request is None:
            raise ParticipationRequestNotFoundError(req_id)
        return request

    async def _reject_pending(self, event_id: int) -> None:
        await self.db.execute(
            update(ParticipationRequest)
            .where(ParticipationRequest.event_id == event_id)
            .where(ParticipationRequest.status == RequestStatus.PENDING.value)
            .values(status=RequestStatus.REJECTED.value)
            .execution_options(synchronize_session="fetch")
        )

    async def confirm_request(
        self, user_id: int, event_id: int, req_id: int,
    ) -> ParticipationRequestDto:
        await get_user_or_404(self.db, user_id)
        event = await get_owned_event_or_404(self.db, user_id, event_id, for_update=True)
        request = await self._get_event_request(event_id, req_id)

        if is_limit_reached(event.participant_limit, event.confirmed_requests):
            await self._reject_pending(event_id)
            await self.db.commit()
            raise RequestConditionError("The participant limit has been reached")
        check_can_decide(RequestStatus(request.status))

        event.confirmed_requests += 1
        request.status = RequestStatus.CONFIRMED.value
        await self.db.flush()
        if is_limit_reached(event.participant_limit, event.confirmed_requests):
            await self._reject_pending(event_id)
        await self.db.commit()

        logger.info(
            f"Request {req_id} confirmed",
            extra={"user_id": user_id, "event_id": event_id},
        )
        return to_request_dto(request)

    async def reject_request(
        self, user_id: int, event_id: int, req_id: int,
    ) -> ParticipationRequestDto:
        await get_user_or_404(self.db, user_id)
        await get_owned_event_or_404(self.db, user_id, event_id)
        request = await self._get_event_request(event_id, req_id)
        check_can_decide(RequestStatus(request.status))
        request.status = RequestStatus.REJECTED.value
        await self.db.commit()
        logger.info(
            f"Request {req_id} rejected",
            extra={"user_id": user_id, "event_id": event_id},
        )
        return to_request_dto(request)

    # ─── Events of a followed user ──────────────────────────────

    async def _find_follower_link(
        self, publisher_id: int, follower_id: int,
    ) -> Follower | None:
        result = await self.db.execute(
            select(Follower)
            .where(Follower.publisher_id == publisher_id)
            .where(Follower.follower_id == follower_id)
        )
        return result.scalar_one_or_none()

    async def get_events_where_participant(
        self, follower_id: int, user_id: int, f: EventFilter,
    ) -> list[EventFullDto]:
        """Events `user_id` takes part in, as seen by their friend `follower_id`."""
        await get_user_or_404(self.db, user_id)
        check_not_self(follower_id, user_id)

        link = await self._find_follower_link(user_id, follower_id)
        check_friend_access(link.group.title if link else None)

        event_ids = (
            select(ParticipationRequest.event_id)
            .join(FriendshipGroup, ParticipationRequest.group_id == FriendshipGroup.id)
            .where(ParticipationRequest.requester_id == user_id)
            .where(ParticipationRequest.status == RequestStatus.CONFIRMED.value)
            .where(FriendshipGroup.title.in_(
                sorted(visible_participation_groups(link.group.title)),
            ))
        )
        f.users = None
        result = await self.db.execute(
            apply_event_filter(select(Event).where(Event.id.in_(event_ids)), f),
        )
        return [to_event_full(e) for e in result.scalars().all()]

    async def get_events_where_creator(
        self, follower_id: int, user_id: int, f: EventFilter,
    ) -> list[EventFullDto]:
        """Published events initiated by `user_id`, as seen by subscriber `follower_id`."""
        await get_user_or_404(self.db, user_id)
        check_not_self(follower_id, user_id)

        link = await self._find_follower_link(user_id, follower_id)
        check_subscriber_access(link is not None)

        f.users = [user_id]
        f.states = [EventState.PUBLISHED]
        result = await self.db.execute(apply_event_filter(select(Event), f))
        return [to_event_full(e) for e in result.scalars().all()]
