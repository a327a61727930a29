"""Public — browsing published events, categories and compilations."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ewm.api.params import event_filter_params
from ewm.core.event_filter import EventFilter
from ewm.infrastructure.database import get_db
from ewm.schemas.category import CategoryDto
from ewm.schemas.compilation import CompilationDto
from ewm.schemas.event import EventFullDto, EventShortDto
from ewm.services.category_service import CategoryService
from ewm.services.compilation_service import CompilationService
from ewm.services.public_event_service import PublicEventService

router = APIRouter(tags=["public"])


@router.get("/events", response_model=list[EventShortDto])
async def get_events(
    f: EventFilter = Depends(event_filter_params),
    db: AsyncSession = Depends(get_db),
):
    return await PublicEventService(db).get_events(f)


@router.get("/events/{event_id}", response_model=EventFullDto)
async def get_event(event_id: int, db: AsyncSession = Depends(get_db)):
    return await PublicEventService(db).get_event(event_id)


@router.get("/categories", response_model=list[CategoryDto])
async def get_categories(
    from_: int = Query(0, ge=0, alias="from"),
    size: int = Query(10, gt=0),
    db: AsyncSession = Depends(get_db),
):
    return await CategoryService(db).get_categories(from_, size)


@router.get("/categories/{cat_id}", response_model=CategoryDto)
async def get_category(cat_id: int, db: AsyncSession = Depends(get_db)):
    return await CategoryService(db).get_category(cat_id)


@router.get("/compilations", response_model=list[CompilationDto])
async def get_compilations(
    pinned: bool | None = Query(None),
    from_: int = Query(0, ge=0, alias="from"),
    size: int = Query(10, gt=0),
    db: AsyncSession = Depends(get_db),
):
    return await CompilationService(db).get_compilations(pinned, from_, size)


@router.get("/compilations/{comp_id}", response_model=CompilationDto)
async def get_compilation(comp_id: int, db: AsyncSession = Depends(get_db)):
    return await CompilationService(db).get_compilation(comp_id)
