"""Public area — published events, categories and compilations."""

from fastapi import APIRouter, Depends, Query, Request

from ewm.api.params import event_filter_params
from ewm.core.event_filter import EventFilter
from gateway.clients import Clients, get_clients

router = APIRouter(tags=["public"])


@router.get("/events")
async def get_events(
    request: Request,
    f: EventFilter = Depends(event_filter_params),
    clients: Clients = Depends(get_clients),
):
    return await clients.public.forward(request)


@router.get("/events/{event_id}")
async def get_event(
    request: Request, event_id: int, clients: Clients = Depends(get_clients),
):
    return await clients.public.forward(request)


@router.get("/categories")
async def get_categories(
    request: Request,
    from_: int = Query(0, ge=0, alias="from"),
    size: int = Query(10, gt=0),
    clients: Clients = Depends(get_clients),
):
    return await clients.public.forward(request)


@router.get("/categories/{cat_id}")
async def get_category(
    request: Request, cat_id: int, clients: Clients = Depends(get_clients),
):
    return await clients.public.forward(request)


@router.get("/compilations")
async def get_compilations(
    request: Request,
    pinned: bool | None = Query(None),
    from_: int = Query(0, ge=0, alias="from"),
    size: int = Query(10, gt=0),
    clients: Clients = Depends(get_clients),
):
    return await clients.public.forward(request)


@router.get("/compilations/{comp_id}")
async def get_compilation(
    request: Request, comp_id: int, clients: Clients = Depends(get_clients),
):
    return await clients.public.forward(request)
