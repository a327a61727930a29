"""Subscriptions — follow requests, friendship groups and follower links.

Route order matters: /subscriptions/incoming and /subscriptions/outgoing
are declared before /subscriptions/{subscription_id}.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ewm.core.domain_types import SubscriptionStatus
from ewm.infrastructure.database import get_db
from ewm.schemas.subscription import (
    FollowerDto, GroupDto, NewGroupDto, NewSubscriptionRequest, SubscriptionRequestDto,
)
from ewm.services.subscription_service import SubscriptionService

router = APIRouter(prefix="/users", tags=["private: subscriptions"])


# ─── Requests ───────────────────────────────────────────────────

@router.post(
    "/{follower_id}/subscriptions", response_model=SubscriptionRequestDto,
    status_code=status.HTTP_201_CREATED,
)
async def add_subscribe(
    follower_id: int,
    body: NewSubscriptionRequest,
    publisher_id: int = Query(..., gt=0, alias="publisherId"),
    db: AsyncSession = Depends(get_db),
):
    return await SubscriptionService(db).add_subscribe(follower_id, publisher_id, body)


@router.get(
    "/{user_id}/subscriptions/incoming",
    response_model=list[SubscriptionRequestDto],
)
async def get_incoming_subscriptions(
    user_id: int,
    status_: SubscriptionStatus | None = Query(None, alias="status"),
    from_: int = Query(0, ge=0, alias="from"),
    size: int = Query(10, gt=0),
    db: AsyncSession = Depends(get_db),
):
    return await SubscriptionService(db).get_incoming_subscriptions(
        user_id, status_, from_, size,
    )


@router.get(
    "/{user_id}/subscriptions/outgoing",
    response_model=list[SubscriptionRequestDto],
)
async def get_outgoing_subscriptions(
    user_id: int,
    status_: SubscriptionStatus | None = Query(None, alias="status"),
    from_: int = Query(0, ge=0, alias="from"),
    size: int = Query(10, gt=0),
    db: AsyncSession = Depends(get_db),
):
    return await SubscriptionService(db).get_outgoing_subscriptions(
        user_id, status_, from_, size,
    )


@router.get(
    "/{user_id}/subscriptions/{subscription_id}",
    response_model=SubscriptionRequestDto,
)
async def get_subscription(
    user_id: int, subscription_id: int, db: AsyncSession = Depends(get_db),
):
    return await SubscriptionService(db).get_subscription(user_id, subscription_id)


@router.patch(
    "/{follower_id}/subscriptions/{subscription_id}/revoke",
    response_model=SubscriptionRequestDto,
)
async def revoke_request_by_subscriber(
    follower_id: int, subscription_id: int, db: AsyncSession = Depends(get_db),
):
    return await SubscriptionService(db).revoke_request_by_subscriber(
        follower_id, subscription_id,
    )


@router.patch(
    "/{publisher_id}/subscriptions/{subscription_id}/cancel",
    response_model=SubscriptionRequestDto,
)
async def cancel_request_by_publisher(
    publisher_id: int, subscription_id: int, db: AsyncSession = Depends(get_db),
):
    return await SubscriptionService(db).cancel_request_by_publisher(
        publisher_id, subscription_id,
    )


@router.patch(
    "/{publisher_id}/subscriptions/{subscription_id}/accept",
    response_model=SubscriptionRequestDto,
)
async def accept_subscribe(
    publisher_id: int,
    subscription_id: int,
    friendship: bool | None = Query(None),
    group: str | None = Query(None, min_length=1, max_length=50),
    db: AsyncSession = Depends(get_db),
):
    return await SubscriptionService(db).accept_subscribe(
        publisher_id, subscription_id, friendship, group,
    )


# ─── Groups ─────────────────────────────────────────────────────

@router.post(
    "/{user_id}/groups", response_model=GroupDto,
    status_code=status.HTTP_201_CREATED,
)
async def add_new_group(user_id: int, body: NewGroupDto, db: AsyncSession = Depends(get_db)):
    return await SubscriptionService(db).add_new_group(user_id, body)


@router.get("/{user_id}/groups", response_model=list[GroupDto])
async def get_groups(user_id: int, db: AsyncSession = Depends(get_db)):
    return await SubscriptionService(db).get_groups(user_id)


# ─── Follower links ─────────────────────────────────────────────

@router.get("/{user_id}/followers", response_model=list[FollowerDto])
async def get_followers(
    user_id: int,
    group: str | None = Query(None, min_length=1, max_length=50),
    db: AsyncSession = Depends(get_db),
):
    return await SubscriptionService(db).get_followers(user_id, group)


@router.patch("/{publisher_id}/followers/{follower_id}", response_model=FollowerDto)
async def change_follower_group(
    publisher_id: int,
    follower_id: int,
    group: str = Query(..., min_length=1, max_length=50),
    db: AsyncSession = Depends(get_db),
):
    return await SubscriptionService(db).change_follower_group(
        publisher_id, follower_id, group,
    )


@router.get("/{user_id}/publishers", response_model=list[FollowerDto])
async def get_publishers(user_id: int, db: AsyncSession = Depends(get_db)):
    return await SubscriptionService(db).get_publishers(user_id)


@router.delete(
    "/{follower_id}/publishers/{publisher_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def unsubscribe(
    follower_id: int, publisher_id: int, db: AsyncSession = Depends(get_db),
):
    await SubscriptionService(db).unsubscribe(follower_id, publisher_id)
