"""Admin Events — search, edit and moderate any event."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ewm.api.params import admin_event_filter_params
from ewm.core.event_filter import EventFilter
from ewm.infrastructure.database import get_db
from ewm.schemas.event import AdminUpdateEventRequest, EventFullDto
from ewm.services.admin_event_service import AdminEventService

router = APIRouter(prefix="/admin/events", tags=["admin: events"])


@router.get("", response_model=list[EventFullDto])
async def search_events(
    f: EventFilter = Depends(admin_event_filter_params),
    db: AsyncSession = Depends(get_db),
):
    return await AdminEventService(db).search_events(f)


@router.put("/{event_id}", response_model=EventFullDto)
async def update_event(
    event_id: int, body: AdminUpdateEventRequest,
    db: AsyncSession = Depends(get_db),
):
    return await AdminEventService(db).update_event(event_id, body)


@router.patch("/{event_id}/publish", response_model=EventFullDto)
async def publish_event(event_id: int, db: AsyncSession = Depends(get_db)):
    return await AdminEventService(db).publish_event(event_id)


@router.patch("/{event_id}/reject", response_model=EventFullDto)
async def reject_event(event_id: int, db: AsyncSession = Depends(get_db)):
    return await AdminEventService(db).reject_event(event_id)
