"""Subscription Service — subscription requests, friendship groups and follower links.

Invariants:
    - Only the follower may revoke, only the publisher may accept or cancel,
      and only while the request is WAITING (other requests look missing)
    - Accepting creates exactly one Follower link in one of the publisher's groups
    - Incoming = requests addressed to the user (user is publisher);
      outgoing = requests the user sent (user is follower)
    - A request is visible to both of its parties and nobody else
    - Unsubscribing removes the link and revokes the accepted request,
      so the pair may start over

Design Decisions:
    - `friendship` on accept defaults to what the follower asked for
    - Every state change stamps `updated` and is logged with the subscription id
"""

import logging
from datetime import datetime

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ewm.core.domain_types import SubscriptionStatus
from ewm.core.enforce_subscriptions import (
    check_can_subscribe, check_not_self, check_transition,
    normalize_group_title, resolve_follower_group,
)
from ewm.core.errors import (
    FollowerNotFoundError, RequestConditionError, SubscriptionNotFoundError,
)
from ewm.core.pagination import make_page
from ewm.models import Follower, FriendshipGroup, SubscriptionRequest
from ewm.schemas.subscription import (
    FollowerDto, GroupDto, NewGroupDto, NewSubscriptionRequest, SubscriptionRequestDto,
)
from ewm.services.lookups import find_group, get_group_or_404, get_user_or_404
from ewm.services.mappers import to_follower_dto, to_group_dto, to_subscription_dto

logger = logging.getLogger(__name__)


class SubscriptionService:
    """Follow/friendship workflow between two users."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ─── Lookups ────────────────────────────────────────────────

    async def _find_link(self, publisher_id: int, follower_id: int) -> Follower | None:
        result = await self.db.execute(
            select(Follower)
            .where(Follower.publisher_id == publisher_id)
            .where(Follower.follower_id == follower_id)
        )
        return result.scalar_one_or_none()

    async def _get_waiting(
        self, subscription_id: int, *, follower_id: int | None = None,
        publisher_id: int | None = None,
    ) -> SubscriptionRequest:
        query = (
            select(SubscriptionRequest)
            .where(SubscriptionRequest.id == subscription_id)
            .where(SubscriptionRequest.status == SubscriptionStatus.WAITING.value)
        )
        if follower_id is not None:
            query = query.where(SubscriptionRequest.follower_id == follower_id)
        if publisher_id is not None:
            query = query.where(SubscriptionRequest.publisher_id == publisher_id)
        result = await self.db.execute(query)
        request = result.scalar_one_or_none()
        if request is None:
            raise SubscriptionNotFoundError(subscription_id)
        return request

    def _move(self, request: SubscriptionRequest, target: SubscriptionStatus) -> None:
        check_transition(SubscriptionStatus(request.status), target)
        request.status = target.value
        request.updated = datetime.now()

    # ─── Requests ───────────────────────────────────────────────

    async def add_subscribe(
        self, follower_id: int, publisher_id: int, body: NewSubscriptionRequest,
    ) -> SubscriptionRequestDto:
        follower = await get_user_or_404(self.db, follower_id)
        publisher = await get_user_or_404(self.db, publisher_id)
        check_not_self(follower_id, publisher_id)

        live = await self.db.execute(
            select(SubscriptionRequest.id)
            .where(SubscriptionRequest.follower_id == follower_id)
            .where(SubscriptionRequest.publisher_id == publisher_id)
            .where(SubscriptionRequest.status != SubscriptionStatus.REVOKE.value)
        )
        link = await self._find_link(publisher_id, follower_id)
        check_can_subscribe(live.first() is not None, link is not None)

        request = SubscriptionRequest(
            follower=follower,
            publisher=publisher,
            status=SubscriptionStatus.WAITING.value,
            friendship=body.friendship,
            message=body.message,
            created=datetime.now(),
        )
        self.db.add(request)
        await self.db.commit()

        logger.info(
            f"Subscription request {request.id} from {follower_id} to {publisher_id} added",
            extra={"user_id": follower_id, "subscription_id": request.id},
        )
        return to_subscription_dto(request)

    async def revoke_request_by_subscriber(
        self, follower_id: int, subscription_id: int,
    ) -> SubscriptionRequestDto:
        await get_user_or_404(self.db, follower_id)
        request = await self._get_waiting(subscription_id, follower_id=follower_id)
        self._move(request, SubscriptionStatus.REVOKE)
        await self.db.commit()
        logger.info(
            f"Subscription request {subscription_id} revoked by follower",
            extra={"user_id": follower_id, "subscription_id": subscription_id},
        )
        return to_subscription_dto(request)

    async def cancel_request_by_publisher(
        self, publisher_id: int, subscription_id: int,
    ) -> SubscriptionRequestDto:
        await get_user_or_404(self.db, publisher_id)
        request = await self._get_waiting(subscription_id, publisher_id=publisher_id)
        self._move(request, SubscriptionStatus.CANCELED)
        await self.db.commit()
        logger.info(
            f"Subscription request {subscription_id} canceled by publisher",
            extra={"user_id": publisher_id, "subscription_id": subscription_id},
        )
        return to_subscription_dto(request)

    async def accept_subscribe(
        self,
        publisher_id: int,
        subscription_id: int,
        friendship: bool | None = None,
        group: str | None = None,
    ) -> SubscriptionRequestDto:
        await get_user_or_404(self.db, publisher_id)
        request = await self._get_waiting(subscription_id, publisher_id=publisher_id)

        as_friend = request.friendship if friendship is None else friendship
        title = resolve_follower_group(as_friend, group)
        target_group = await get_group_or_404(self.db, publisher_id, title)

        self._move(request, SubscriptionStatus.CONSIDER)
        self.db.add(Follower(
            publisher=request.publisher,
            follower=request.follower,
            group=target_group,
            created=datetime.now(),
        ))
        await self.db.commit()

        logger.info(
            f"Follower {request.follower_id} added to group {title} by request {subscription_id}",
            extra={"user_id": publisher_id, "subscription_id": subscription_id},
        )
        return to_subscription_dto(request)

    async def _list_requests(
        self, column, user_id: int, status: SubscriptionStatus | None,
        from_: int, size: int,
    ) -> list[SubscriptionRequestDto]:
        await get_user_or_404(self.db, user_id)
        page = make_page(from_, size)
        query = select(SubscriptionRequest).where(column == user_id)
        if status is not None:
            query = query.where(SubscriptionRequest.status == status.value)
        result = await self.db.execute(
            query.order_by(SubscriptionRequest.id)
            .offset(page.offset).limit(page.limit)
        )
        return [to_subscription_dto(r) for r in result.scalars().all()]

    async def get_incoming_subscriptions(
        self, user_id: int, status: SubscriptionStatus | None, from_: int, size: int,
    ) -> list[SubscriptionRequestDto]:
        return await self._list_requests(
            SubscriptionRequest.publisher_id, user_id, status, from_, size,
        )

    async def get_outgoing_subscriptions(
        self, user_id: int, status: SubscriptionStatus | None, from_: int, size: int,
    ) -> list[SubscriptionRequestDto]:
        return await self._list_requests(
            SubscriptionRequest.follower_id, user_id, status, from_, size,
        )

    async def get_subscription(
        self, user_id: int, subscription_id: int,
    ) -> SubscriptionRequestDto:
        await get_user_or_404(self.db, user_id)
        result = await self.db.execute(
            select(SubscriptionRequest)
            .where(SubscriptionRequest.id == subscription_id)
            .where(or_(
                SubscriptionRequest.follower_id == user_id,
                SubscriptionRequest.publisher_id == user_id,
            ))
        )
        request = result.scalar_one_or_none()
        if request is None:
            raise SubscriptionNotFoundError(subscription_id)
        return to_subscription_dto(request)

    # ─── Groups ─────────────────────────────────────────────────

    async def add_new_group(self, user_id: int, body: NewGroupDto) -> GroupDto:
        await get_user_or_404(self.db, user_id)
        if await find_group(self.db, user_id, body.title) is not None:
            raise RequestConditionError("Group with this title already exists")
        group = FriendshipGroup(user_id=user_id, title=normalize_group_title(body.title))
        self.db.add(group)
        await self.db.commit()
        logger.info(f"Group {group.title} added", extra={"user_id": user_id})
        return to_group_dto(group)

    async def get_groups(self, user_id: int) -> list[GroupDto]:
        await get_user_or_404(self.db, user_id)
        result = await self.db.execute(
            select(FriendshipGroup)
            .where(FriendshipGroup.user_id == user_id)
            .order_by(FriendshipGroup.id)
        )
        return [to_group_dto(g) for g in result.scalars().all()]

    # ─── Follower links ─────────────────────────────────────────

    async def get_followers(
        self, user_id: int, group: str | None = None,
    ) -> list[FollowerDto]:
        await get_user_or_404(self.db, user_id)
        query = select(Follower).where(Follower.publisher_id == user_id)
        if group:
            query = query.join(
                FriendshipGroup, Follower.group_id == FriendshipGroup.id,
            ).where(FriendshipGroup.title == normalize_group_title(group))
        result = await self.db.execute(query.order_by(Follower.id))
        return [to_follower_dto(f) for f in result.scalars().all()]

    async def get_publishers(self, user_id: int) -> list[FollowerDto]:
        await get_user_or_404(self.db, user_id)
        result = await self.db.execute(
            select(Follower)
            .where(Follower.follower_id == user_id)
            .order_by(Follower.id)
        )
        return [to_follower_dto(f) for f in result.scalars().all()]

    async def change_follower_group(
        self, publisher_id: int, follower_id: int, group: str,
    ) -> FollowerDto:
        await get_user_or_404(self.db, publisher_id)
        link = await self._find_link(publisher_id, follower_id)
        if link is None:
            raise FollowerNotFoundError(follower_id)
        link.group = await get_group_or_404(self.db, publisher_id, group)
        await self.db.commit()
        logger.info(
            f"Follower {follower_id} moved to group {link.group.title}",
            extra={"user_id": publisher_id},
        )
        return to_follower_dto(link)

    async def unsubscribe(self, follower_id: int, publisher_id: int) -> None:
        await get_user_or_404(self.db, follower_id)
        link = await self._find_link(publisher_id, follower_id)
        if link is None:
            raise FollowerNotFoundError(follower_id)

        accepted = await self.db.execute(
            select(SubscriptionRequest)
            .where(SubscriptionRequest.follower_id == follower_id)
            .where(SubscriptionRequest.publisher_id == publisher_id)
            .where(SubscriptionRequest.status == SubscriptionStatus.CONSIDER.value)
        )
        for request in accepted.scalars().all():
            self._move(request, SubscriptionStatus.REVOKE)
        await self.db.delete(link)
        await self.db.commit()
        logger.info(
            f"User {follower_id} unsubscribed from {publisher_id}",
            extra={"user_id": follower_id},
        )
