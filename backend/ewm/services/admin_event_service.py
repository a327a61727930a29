"""Admin Event Service — moderation and search over all events.

Invariants:
    - Admin updates may touch any field of an event in any state
    - A new event date set by an admin must be at least MIN_HOURS_BEFORE_PUBLISH ahead
    - publish: PENDING only, stamps published_on
    - reject: anything but PUBLISHED, moves to CANCELED
"""

import logging
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ewm.config import get_settings
from ewm.core.domain_types import EventState
from ewm.core.enforce_events import check_can_publish, check_can_reject, check_event_date
from ewm.models import Event
from ewm.schemas.event import AdminUpdateEventRequest, EventFullDto
from ewm.core.event_filter import EventFilter
from ewm.services.event_query import apply_event_filter
from ewm.services.lookups import (
    find_or_create_location, get_category_or_404, get_event_or_404,
)
from ewm.services.mappers import to_event_full

logger = logging.getLogger(__name__)


class AdminEventService:

    def __init__(self, db: AsyncSession):
        self.db = db
        self.min_hours_before_publish = get_settings().min_hours_before_publish

    async def search_events(self, f: EventFilter) -> list[EventFullDto]:
        result = await self.db.execute(apply_event_filter(select(Event), f))
        return [to_event_full(e) for e in result.scalars().all()]

    async def update_event(
        self, event_id: int, body: AdminUpdateEventRequest,
    ) -> EventFullDto:
        event = await get_event_or_404(self.db, event_id)

        if body.category is not None:
            event.category = await get_category_or_404(self.db, body.category)
        if body.event_date is not None:
            check_event_date(
                body.event_date, datetime.now(), self.min_hours_before_publish,
            )
            event.event_date = body.event_date
        if body.location is not None:
            event.location = await find_or_create_location(self.db, body.location)
        for name in (
            "annotation", "description", "paid", "participant_limit",
            "request_moderation", "title",
        ):
            value = getattr(body, name)
            if value is not None:
                setattr(event, name, value)

        await self.db.commit()
        logger.info(
            f"Event {event_id} updated by admin",
            extra={"event_id": event_id},
        )
        return to_event_full(event)

    async def publish_event(self, event_id: int) -> EventFullDto:
        event = await get_event_or_404(self.db, event_id)
        now = datetime.now()
        check_can_publish(
            EventState(event.state), event.event_date, now,
            self.min_hours_before_publish,
        )
        event.state = EventState.PUBLISHED.value
        event.published_on = now
        await self.db.commit()
        logger.info(f"Event {event_id} published", extra={"event_id": event_id})
        return to_event_full(event)

    async def reject_event(self, event_id: int) -> EventFullDto:
        event = await get_event_or_404(self.db, event_id)
        check_can_reject(EventState(event.state))
        event.state = EventState.CANCELED.value
        await self.db.commit()
        logger.info(f"Event {event_id} rejected", extra={"event_id": event_id})
        return to_event_full(event)
