"""Public Event Service — anonymous browsing of published events.

Invariants:
    - Only PUBLISHED events are ever visible
    - Without a date range only future events are listed
    - Every successful single-event read increments views
"""

import logging
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ewm.core.domain_types import EventState
from ewm.core.errors import EventNotFoundError
from ewm.models import Event
from ewm.schemas.event import EventFullDto, EventShortDto
from ewm.core.event_filter import EventFilter
from ewm.services.event_query import apply_event_filter
from ewm.services.mappers import to_event_full, to_event_short

logger = logging.getLogger(__name__)


class PublicEventService:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_events(self, f: EventFilter) -> list[EventShortDto]:
        f.states = [EventState.PUBLISHED]
        f.users = None
        if f.range_start is None and f.range_end is None:
            f.range_start = datetime.now()
        result = await self.db.execute(apply_event_filter(select(Event), f))
        return [to_event_short(e) for e in result.scalars().all()]

    async def get_event(self, event_id: int) -> EventFullDto:
        result = await self.db.execute(
            select(Event)
            .where(Event.id == event_id)
            .where(Event.state == EventState.PUBLISHED.value)
        )
        event = result.scalar_one_or_none()
        if event is None:
            raise EventNotFoundError(event_id)
        event.views += 1
        await self.db.commit()
        return to_event_full(event)
