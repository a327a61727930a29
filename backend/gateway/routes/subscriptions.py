"""Subscriptions area — follow requests, groups and follower links."""

from fastapi import APIRouter, Depends, Query, Request

from ewm.core.domain_types import SubscriptionStatus
from ewm.schemas.subscription import NewGroupDto, NewSubscriptionRequest
from gateway.clients import Clients, get_clients

router = APIRouter(prefix="/users", tags=["subscriptions"])


@router.post("/{follower_id}/subscriptions")
async def add_subscribe(
    request: Request,
    follower_id: int,
    body: NewSubscriptionRequest,
    publisher_id: int = Query(..., gt=0, alias="publisherId"),
    clients: Clients = Depends(get_clients),
):
    return await clients.subscriptions.forward(request, body)


@router.get("/{user_id}/subscriptions/incoming")
async def get_incoming_subscriptions(
    request: Request,
    user_id: int,
    status_: SubscriptionStatus | None = Query(None, alias="status"),
    from_: int = Query(0, ge=0, alias="from"),
    size: int = Query(10, gt=0),
    clients: Clients = Depends(get_clients),
):
    return await clients.subscriptions.forward(request)


@router.get("/{user_id}/subscriptions/outgoing")
async def get_outgoing_subscriptions(
    request: Request,
    user_id: int,
    status_: SubscriptionStatus | None = Query(None, alias="status"),
    from_: int = Query(0, ge=0, alias="from"),
    size: int = Query(10, gt=0),
    clients: Clients = Depends(get_clients),
):
    return await clients.subscriptions.forward(request)


@router.get("/{user_id}/subscriptions/{subscription_id}")
async def get_subscription(
    request: Request, user_id: int, subscription_id: int,
    clients: Clients = Depends(get_clients),
):
    return await clients.subscriptions.forward(request)


@router.patch("/{follower_id}/subscriptions/{subscription_id}/revoke")
async def revoke_request_by_subscriber(
    request: Request, follower_id: int, subscription_id: int,
    clients: Clients = Depends(get_clients),
):
    return await clients.subscriptions.forward(request)


@router.patch("/{publisher_id}/subscriptions/{subscription_id}/cancel")
async def cancel_request_by_publisher(
    request: Request, publisher_id: int, subscription_id: int,
    clients: Clients = Depends(get_clients),
):
    return await clients.subscriptions.forward(request)


@router.patch("/{publisher_id}/subscriptions/{subscription_id}/accept")
async def accept_subscribe(
    request: Request,
    publisher_id: int,
    subscription_id: int,
    friendship: bool | None = Query(None),
    group: str | None = Query(None, min_length=1, max_length=50),
    clients: Clients = Depends(get_clients),
):
    return await clients.subscriptions.forward(request)


@router.post("/{user_id}/groups")
async def add_new_group(
    request: Request, user_id: int, body: NewGroupDto,
    clients: Clients = Depends(get_clients),
):
    return await clients.subscriptions.forward(request, body)


@router.get("/{user_id}/groups")
async def get_groups(
    request: Request, user_id: int, clients: Clients = Depends(get_clients),
):
    return await clients.subscriptions.forward(request)


@router.get("/{user_id}/followers")
async def get_followers(
    request: Request,
    user_id: int,
    group: str | None = Query(None, min_length=1, max_length=50),
    clients: Clients = Depends(get_clients),
):
    return await clients.subscriptions.forward(request)


@router.patch("/{publisher_id}/followers/{follower_id}")
async def change_follower_group(
    request: Request,
    publisher_id: int,
    follower_id: int,
    group: str = Query(..., min_length=1, max_length=50),
    clients: Clients = Depends(get_clients),
):
    return await clients.subscriptions.forward(request)


@router.get("/{user_id}/publishers")
async def get_publishers(
    request: Request, user_id: int, clients: Clients = Depends(get_clients),
):
    return await clients.subscriptions.forward(request)


@router.delete("/{follower_id}/publishers/{publisher_id}")
async def unsubscribe(
    request: Request, follower_id: int, publisher_id: int,
    clients: Clients = Depends(get_clients),
):
    return await clients.subscriptions.forward(request)
