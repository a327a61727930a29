"""Admin User Service — create, list and delete users.

Invariants:
    - Emails are unique (ConflictError on duplicates)
    - Every new user gets the default FOLLOWER and FRIENDS_ALL groups in the same transaction
    - Users who initiated events cannot be deleted
    - Deleting a user removes their participation requests, subscriptions,
      follower links and groups
    - Seats held by the deleted user's CONFIRMED requests are released
"""

import logging

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ewm.core.domain_types import DEFAULT_GROUPS, RequestStatus
from ewm.core.errors import ConflictError, RequestConditionError
from ewm.core.pagination import make_page
from ewm.models import (
    Event, Follower, FriendshipGroup, ParticipationRequest, SubscriptionRequest, User,
)
from ewm.schemas.user import NewUserRequest, UserDto
from ewm.services.lookups import get_user_or_404
from ewm.services.mappers import to_user_dto

logger = logging.getLogger(__name__)


class UserService:
    """Admin operations on users."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def add_user(self, body: NewUserRequest) -> UserDto:
        result = await self.db.execute(
            select(User.id).where(func.lower(User.email) == body.email.lower()),
        )
        if result.scalar_one_or_none() is not None:
            raise ConflictError(f"User with email {body.email} already exists")

        user = User(name=body.name, email=body.email)
        self.db.add(user)
        await self.db.flush()
        for title in DEFAULT_GROUPS:
            self.db.add(FriendshipGroup(user_id=user.id, title=title))
        await self.db.commit()

        logger.info(f"User {user.id} created", extra={"user_id": user.id})
        return to_user_dto(user)

    async def get_users(
        self, ids: list[int] | None, from_: int, size: int,
    ) -> list[UserDto]:
        page = make_page(from_, size)
        query = select(User).order_by(User.id)
        if ids:
            query = query.where(User.id.in_(ids))
        result = await self.db.execute(query.offset(page.offset).limit(page.limit))
        return [to_user_dto(u) for u in result.scalars().all()]

    async def delete_user(self, user_id: int) -> None:
        user = await get_user_or_404(self.db, user_id)

        events = await self.db.execute(
            select(func.count(Event.id)).where(Event.initiator_id == user_id),
        )
        if events.scalar_one() > 0:
            raise RequestConditionError("User has initiated events and cannot be deleted")

        # One request per (event, requester), so each event gives back one seat
        await self.db.execute(
            update(Event)
            .where(Event.id.in_(
                select(ParticipationRequest.event_id)
                .where(ParticipationRequest.requester_id == user_id)
                .where(ParticipationRequest.status == RequestStatus.CONFIRMED.value)
            ))
            .where(Event.confirmed_requests > 0)
            .values(confirmed_requests=Event.confirmed_requests - 1)
            .execution_options(synchronize_session="fetch")
        )
        await self.db.execute(
            delete(ParticipationRequest)
            .where(ParticipationRequest.requester_id == user_id)
        )
        await self.db.execute(
            delete(Follower).where(or_(
                Follower.publisher_id == user_id,
                Follower.follower_id == user_id,
            ))
        )
        await self.db.execute(
            delete(SubscriptionRequest).where(or_(
                SubscriptionRequest.publisher_id == user_id,
                SubscriptionRequest.follower_id == user_id,
            ))
        )
        await self.db.execute(
            delete(FriendshipGroup).where(FriendshipGroup.user_id == user_id)
        )
        await self.db.delete(user)
        await self.db.commit()
        logger.info(f"User {user_id} deleted", extra={"user_id": user_id})
