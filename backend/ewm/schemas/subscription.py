"""Subscription Schemas — subscription requests, friendship groups and follower links.

Invariants:
    - NewSubscriptionRequest.friendship asks the publisher for friendship, not just a follow
    - Group titles: 1-50 chars, non-blank (normalized upper-case by the service)
"""

from pydantic import Field, field_validator

from ewm.core.domain_types import SubscriptionStatus
from ewm.schemas.common import CamelModel, EwmDateTime
from ewm.schemas.user import UserShortDto


class NewSubscriptionRequest(CamelModel):
    friendship: bool = False
    message: str | None = Field(None, max_length=1000)


class SubscriptionRequestDto(CamelModel):
    id: int
    follower: UserShortDto
    publisher: UserShortDto
    status: SubscriptionStatus
    friendship: bool
    message: str | None = None
    created: EwmDateTime
    updated: EwmDateTime | None = None


class NewGroupDto(CamelModel):
    title: str = Field(min_length=1, max_length=50)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v


class GroupDto(CamelModel):
    id: int
    title: str


class FollowerDto(CamelModel):
    id: int
    publisher: UserShortDto
    follower: UserShortDto
    group: str
    created: EwmDateTime
