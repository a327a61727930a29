"""Admin Compilations — create, fill, pin and delete compilations."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ewm.infrastructure.database import get_db
from ewm.schemas.compilation import CompilationDto, NewCompilationDto
from ewm.services.compilation_service import CompilationService

router = APIRouter(prefix="/admin/compilations", tags=["admin: compilations"])


@router.post("", response_model=CompilationDto, status_code=status.HTTP_201_CREATED)
async def add_compilation(body: NewCompilationDto, db: AsyncSession = Depends(get_db)):
    return await CompilationService(db).add_compilation(body)


@router.delete("/{comp_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_compilation(comp_id: int, db: AsyncSession = Depends(get_db)):
    await CompilationService(db).delete_compilation(comp_id)


@router.delete("/{comp_id}/events/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_event(comp_id: int, event_id: int, db: AsyncSession = Depends(get_db)):
    await CompilationService(db).remove_event(comp_id, event_id)


@router.patch("/{comp_id}/events/{event_id}")
async def add_event(comp_id: int, event_id: int, db: AsyncSession = Depends(get_db)):
    await CompilationService(db).add_event(comp_id, event_id)


@router.delete("/{comp_id}/pin", status_code=status.HTTP_204_NO_CONTENT)
async def unpin(comp_id: int, db: AsyncSession = Depends(get_db)):
    await CompilationService(db).set_pinned(comp_id, False)


@router.patch("/{comp_id}/pin")
async def pin(comp_id: int, db: AsyncSession = Depends(get_db)):
    await CompilationService(db).set_pinned(comp_id, True)
