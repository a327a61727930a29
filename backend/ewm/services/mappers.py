"""Mappers — ORM entity -> response schema conversion.

Invariants:
    - Pure functions: read attributes already loaded (selectin), never trigger IO
    - Every response schema is built here; routes never touch ORM attributes
"""

from ewm.models import (
    Category, Compilation, Event, Follower, FriendshipGroup,
    ParticipationRequest, SubscriptionRequest, User,
)
from ewm.schemas.category import CategoryDto
from ewm.schemas.compilation import CompilationDto
from ewm.schemas.event import EventFullDto, EventShortDto, LocationDto
from ewm.schemas.request import ParticipationRequestDto
from ewm.schemas.subscription import FollowerDto, GroupDto, SubscriptionRequestDto
from ewm.schemas.user import UserDto, UserShortDto


def to_user_dto(user: User) -> UserDto:
    return UserDto(id=user.id, name=user.name, email=user.email)


def to_user_short(user: User) -> UserShortDto:
    return UserShortDto(id=user.id, name=user.name)


def to_category_dto(category: Category) -> CategoryDto:
    return CategoryDto(id=category.id, name=category.name)


def to_event_short(event: Event) -> EventShortDto:
    return EventShortDto(
        id=event.id,
        annotation=event.annotation,
        category=to_category_dto(event.category),
        confirmed_requests=event.confirmed_requests,
        event_date=event.event_date,
        initiator=to_user_short(event.initiator),
        paid=event.paid,
        title=event.title,
        views=event.views,
    )


def to_event_full(event: Event) -> EventFullDto:
    return EventFullDto(
        id=event.id,
        annotation=event.annotation,
        category=to_category_dto(event.category),
        confirmed_requests=event.confirmed_requests,
        created_on=event.created_on,
        description=event.description,
        event_date=event.event_date,
        initiator=to_user_short(event.initiator),
        location=LocationDto(lat=event.location.lat, lon=event.location.lon),
        paid=event.paid,
        participant_limit=event.participant_limit,
        published_on=event.published_on,
        request_moderation=event.request_moderation,
        state=event.state,
        title=event.title,
        views=event.views,
    )


def to_request_dto(request: ParticipationRequest) -> ParticipationRequestDto:
    return ParticipationRequestDto(
        id=request.id,
        created=request.created,
        event=request.event_id,
        requester=request.requester_id,
        status=request.status,
        group=request.group.title,
    )


def to_compilation_dto(compilation: Compilation) -> CompilationDto:
    return CompilationDto(
        id=compilation.id,
        events=[to_event_short(e) for e in compilation.events],
        pinned=compilation.pinned,
        title=compilation.title,
    )


def to_subscription_dto(request: SubscriptionRequest) -> SubscriptionRequestDto:
    return SubscriptionRequestDto(
        id=request.id,
        follower=to_user_short(request.follower),
        publisher=to_user_short(request.publisher),
        status=request.status,
        friendship=request.friendship,
        message=request.message,
        created=request.created,
        updated=request.updated,
    )


def to_group_dto(group: FriendshipGroup) -> GroupDto:
    return GroupDto(id=group.id, title=group.title)


def to_follower_dto(link: Follower) -> FollowerDto:
    return FollowerDto(
        id=link.id,
        publisher=to_user_short(link.publisher),
        follower=to_user_short(link.follower),
        group=link.group.title,
        created=link.created,
    )
