"""Entity Lookups — load-or-raise helpers shared by every service.

Invariants:
    - Every helper either returns the entity or raises the matching *NotFoundError
    - Group titles are matched ignoring case
    - A (lat, lon) pair maps to exactly one Location row
    - `for_update` locks the event row until commit, so seat counting
      (check limit, then bump confirmed_requests) is serialized per event
"""

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ewm.core.enforce_subscriptions import normalize_group_title
from ewm.core.errors import (
    CategoryNotFoundError, EventNotFoundError, GroupNotFoundError, UserNotFoundError,
)
from ewm.models import Category, Event, FriendshipGroup, Location, User
from ewm.schemas.event import LocationDto


async def get_user_or_404(db: AsyncSession, user_id: int) -> User:
    user = await db.get(User, user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return user


async def get_category_or_404(db: AsyncSession, cat_id: int) -> Category:
    category = await db.get(Category, cat_id)
    if category is None:
        raise CategoryNotFoundError(cat_id)
    return category


def event_query(
    event_id: int, *, initiator_id: int | None = None, for_update: bool = False,
) -> Select:
    query = select(Event).where(Event.id == event_id)
    if initiator_id is not None:
        query = query.where(Event.initiator_id == initiator_id)
    if for_update:
        query = query.with_for_update().execution_options(populate_existing=True)
    return query


async def get_event_or_404(
    db: AsyncSession, event_id: int, *, for_update: bool = False,
) -> Event:
    if not for_update:
        event = await db.get(Event, event_id)
    else:
        result = await db.execute(event_query(event_id, for_update=True))
        event = result.scalar_one_or_none()
    if event is None:
        raise EventNotFoundError(event_id)
    return event


async def get_owned_event_or_404(
    db: AsyncSession, user_id: int, event_id: int, *, for_update: bool = False,
) -> Event:
    """Event initiated by `user_id`; other users' events look missing."""
    result = await db.execute(
        event_query(event_id, initiator_id=user_id, for_update=for_update),
    )
    event = result.scalar_one_or_none()
    if event is None:
        raise EventNotFoundError(event_id)
    return event


async def find_group(
    db: AsyncSession, user_id: int, title: str,
) -> FriendshipGroup | None:
    result = await db.execute(
        select(FriendshipGroup)
        .where(FriendshipGroup.user_id == user_id)
        .where(func.upper(FriendshipGroup.title) == normalize_group_title(title))
    )
    return result.scalar_one_or_none()


async def get_group_or_404(
    db: AsyncSession, user_id: int, title: str,
) -> FriendshipGroup:
    group = await find_group(db, user_id, title)
    if group is None:
        raise GroupNotFoundError(normalize_group_title(title))
    return group


async def find_or_create_location(db: AsyncSession, dto: LocationDto) -> Location:
    result = await db.execute(
        select(Location)
        .where(Location.lat == dto.lat)
        .where(Location.lon == dto.lon)
        .limit(1)
    )
    location = result.scalar_one_or_none()
    if location is None:
        location = Location(lat=dto.lat, lon=dto.lon)
        db.add(location)
    return location
