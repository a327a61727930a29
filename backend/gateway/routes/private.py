"""Private area — a user's events, participation requests and friends' views."""

from fastapi import APIRouter, Depends, Query, Request

from ewm.api.params import event_filter_params
from ewm.core.event_filter import EventFilter
from ewm.schemas.event import NewEventDto, UpdateEventRequest
from gateway.clients import Clients, get_clients

router = APIRouter(prefix="/users", tags=["private"])


# ─── Events ─────────────────────────────────────────────────────

@router.get("/{user_id}/events")
async def get_events_by_owner(
    request: Request,
    user_id: int,
    from_: int = Query(0, ge=0, alias="from"),
    size: int = Query(10, gt=0),
    clients: Clients = Depends(get_clients),
):
    return await clients.private.forward(request)


@router.post("/{user_id}/events")
async def add_event(
    request: Request, user_id: int, body: NewEventDto,
    clients: Clients = Depends(get_clients),
):
    return await clients.private.forward(request, body)


@router.patch("/{user_id}/events")
async def update_event(
    request: Request, user_id: int, body: UpdateEventRequest,
    clients: Clients = Depends(get_clients),
):
    return await clients.private.forward(request, body)


@router.get("/{user_id}/events/{event_id}")
async def get_event(
    request: Request, user_id: int, event_id: int,
    clients: Clients = Depends(get_clients),
):
    return await clients.private.forward(request)


@router.patch("/{user_id}/events/{event_id}")
async def cancel_event(
    request: Request, user_id: int, event_id: int,
    clients: Clients = Depends(get_clients),
):
    return await clients.private.forward(request)


@router.get("/{user_id}/events/{event_id}/requests")
async def get_event_requests(
    request: Request, user_id: int, event_id: int,
    clients: Clients = Depends(get_clients),
):
    return await clients.private.forward(request)


@router.patch("/{user_id}/events/{event_id}/requests/{req_id}/confirm")
async def confirm_request(
    request: Request, user_id: int, event_id: int, req_id: int,
    clients: Clients = Depends(get_clients),
):
    return await clients.private.forward(request)


@router.patch("/{user_id}/events/{event_id}/requests/{req_id}/reject")
async def reject_request(
    request: Request, user_id: int, event_id: int, req_id: int,
    clients: Clients = Depends(get_clients),
):
    return await clients.private.forward(request)


@router.get("/{follower_id}/publishers/{publisher_id}/events/participating")
async def get_events_where_participant(
    request: Request,
    follower_id: int,
    publisher_id: int,
    f: EventFilter = Depends(event_filter_params),
    clients: Clients = Depends(get_clients),
):
    return await clients.private.forward(request)


@router.get("/{follower_id}/publishers/{publisher_id}/events/created")
async def get_events_where_creator(
    request: Request,
    follower_id: int,
    publisher_id: int,
    f: EventFilter = Depends(event_filter_params),
    clients: Clients = Depends(get_clients),
):
    return await clients.private.forward(request)


# ─── Participation requests ─────────────────────────────────────

@router.get("/{user_id}/requests")
async def get_user_requests(
    request: Request, user_id: int, clients: Clients = Depends(get_clients),
):
    return await clients.private.forward(request)


@router.post("/{user_id}/requests")
async def add_request(
    request: Request,
    user_id: int,
    event_id: int = Query(..., gt=0, alias="eventId"),
    group: str | None = Query(None, min_length=1, max_length=50),
    clients: Clients = Depends(get_clients),
):
    return await clients.private.forward(request)


@router.patch("/{user_id}/requests/{request_id}/cancel")
async def cancel_request(
    request: Request, user_id: int, request_id: int,
    clients: Clients = Depends(get_clients),
):
    return await clients.private.forward(request)
