"""Admin area — users, categories, events and compilations."""

from fastapi import APIRouter, Depends, Query, Request

from ewm.api.params import admin_event_filter_params
from ewm.core.event_filter import EventFilter
from ewm.schemas.category import CategoryDto, NewCategoryDto
from ewm.schemas.compilation import NewCompilationDto
from ewm.schemas.event import AdminUpdateEventRequest
from ewm.schemas.user import NewUserRequest
from gateway.clients import Clients, get_clients

router = APIRouter(prefix="/admin", tags=["admin"])


# ─── Users ──────────────────────────────────────────────────────

@router.post("/users")
async def add_user(
    request: Request, body: NewUserRequest, clients: Clients = Depends(get_clients),
):
    return await clients.users.forward(request, body)


@router.get("/users")
async def get_users(
    request: Request,
    ids: list[int] | None = Query(None),
    from_: int = Query(0, ge=0, alias="from"),
    size: int = Query(10, gt=0),
    clients: Clients = Depends(get_clients),
):
    return await clients.users.forward(request)


@router.delete("/users/{user_id}")
async def delete_user(
    request: Request, user_id: int, clients: Clients = Depends(get_clients),
):
    return await clients.users.forward(request)


# ─── Categories ─────────────────────────────────────────────────

@router.post("/categories")
async def add_category(
    request: Request, body: NewCategoryDto, clients: Clients = Depends(get_clients),
):
    return await clients.categories.forward(request, body)


@router.patch("/categories")
async def update_category(
    request: Request, body: CategoryDto, clients: Clients = Depends(get_clients),
):
    return await clients.categories.forward(request, body)


@router.delete("/categories/{cat_id}")
async def delete_category(
    request: Request, cat_id: int, clients: Clients = Depends(get_clients),
):
    return await clients.categories.forward(request)


# ─── Events ─────────────────────────────────────────────────────

@router.get("/events")
async def search_events(
    request: Request,
    f: EventFilter = Depends(admin_event_filter_params),
    clients: Clients = Depends(get_clients),
):
    return await clients.admin_events.forward(request)


@router.put("/events/{event_id}")
async def update_event(
    request: Request, event_id: int, body: AdminUpdateEventRequest,
    clients: Clients = Depends(get_clients),
):
    return await clients.admin_events.forward(request, body)


@router.patch("/events/{event_id}/publish")
async def publish_event(
    request: Request, event_id: int, clients: Clients = Depends(get_clients),
):
    return await clients.admin_events.forward(request)


@router.patch("/events/{event_id}/reject")
async def reject_event(
    request: Request, event_id: int, clients: Clients = Depends(get_clients),
):
    return await clients.admin_events.forward(request)


# ─── Compilations ───────────────────────────────────────────────

@router.post("/compilations")
async def add_compilation(
    request: Request, body: NewCompilationDto, clients: Clients = Depends(get_clients),
):
    return await clients.compilations.forward(request, body)


@router.delete("/compilations/{comp_id}")
async def delete_compilation(
    request: Request, comp_id: int, clients: Clients = Depends(get_clients),
):
    return await clients.compilations.forward(request)


@router.delete("/compilations/{comp_id}/events/{event_id}")
async def remove_event(
    request: Request, comp_id: int, event_id: int,
    clients: Clients = Depends(get_clients),
):
    return await clients.compilations.forward(request)


@router.patch("/compilations/{comp_id}/events/{event_id}")
async def add_event(
    request: Request, comp_id: int, event_id: int,
    clients: Clients = Depends(get_clients),
):
    return await clients.compilations.forward(request)


@router.delete("/compilations/{comp_id}/pin")
async def unpin(
    request: Request, comp_id: int, clients: Clients = Depends(get_clients),
):
    return await clients.compilations.forward(request)


@router.patch("/compilations/{comp_id}/pin")
async def pin(
    request: Request, comp_id: int, clients: Clients = Depends(get_clients),
):
    return await clients.compilations.forward(request)
