"""Compilation Service — admin curation and public reads of event compilations.

Invariants:
    - Every event id given on creation must exist
    - Adding an event already in the compilation is a no-op
    - Removing an event that is not in the compilation is a 404
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ewm.core.errors import CompilationNotFoundError, EventNotFoundError
from ewm.core.pagination import make_page
from ewm.models import Compilation, Event
from ewm.schemas.compilation import CompilationDto, NewCompilationDto
from ewm.services.lookups import get_event_or_404
from ewm.services.mappers import to_compilation_dto

logger = logging.getLogger(__name__)


class CompilationService:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _get_or_404(self, comp_id: int) -> Compilation:
        compilation = await self.db.get(Compilation, comp_id)
        if compilation is None:
            raise CompilationNotFoundError(comp_id)
        return compilation

    async def add_compilation(self, body: NewCompilationDto) -> CompilationDto:
        event_ids = list(dict.fromkeys(body.events))
        events: list[Event] = []
        if event_ids:
            result = await self.db.execute(select(Event).where(Event.id.in_(event_ids)))
            found = {e.id: e for e in result.scalars().all()}
            missing = [i for i in event_ids if i not in found]
            if missing:
                raise EventNotFoundError(missing[0])
            events = [found[i] for i in event_ids]

        compilation = Compilation(title=body.title, pinned=body.pinned, events=events)
        self.db.add(compilation)
        await self.db.commit()
        logger.info(f"Compilation {compilation.id} '{compilation.title}' created")
        return to_compilation_dto(compilation)

    async def delete_compilation(self, comp_id: int) -> None:
        compilation = await self._get_or_404(comp_id)
        await self.db.delete(compilation)
        await self.db.commit()
        logger.info(f"Compilation {comp_id} deleted")

    async def add_event(self, comp_id: int, event_id: int) -> None:
        compilation = await self._get_or_404(comp_id)
        event = await get_event_or_404(self.db, event_id)
        if event not in compilation.events:
            compilation.events.append(event)
            await self.db.commit()
        logger.info(f"Event {event_id} added to compilation {comp_id}")

    async def remove_event(self, comp_id: int, event_id: int) -> None:
        compilation = await self._get_or_404(comp_id)
        event = await get_event_or_404(self.db, event_id)
        if event not in compilation.events:
            raise EventNotFoundError(event_id)
        compilation.events.remove(event)
        await self.db.commit()
        logger.info(f"Event {event_id} removed from compilation {comp_id}")

    async def set_pinned(self, comp_id: int, pinned: bool) -> None:
        compilation = await self._get_or_404(comp_id)
        compilation.pinned = pinned
        await self.db.commit()
        logger.info(f"Compilation {comp_id} pinned={pinned}")

    async def get_compilations(
        self, pinned: bool | None, from_: int, size: int,
    ) -> list[CompilationDto]:
        page = make_page(from_, size)
        query = select(Compilation).order_by(Compilation.id)
        if pinned is not None:
            query = query.where(Compilation.pinned.is_(pinned))
        result = await self.db.execute(query.offset(page.offset).limit(page.limit))
        return [to_compilation_dto(c) for c in result.scalars().all()]

    async def get_compilation(self, comp_id: int) -> CompilationDto:
        return to_compilation_dto(await self._get_or_404(comp_id))
