"""Event Schemas — creation, update and read models for events.

Invariants:
    - NewEventDto carries every mandatory event field; defaults match the ORM defaults
    - UpdateEventRequest (owner) identifies the event in the body (eventId)
    - AdminUpdateEventRequest may also move the location and toggle moderation
    - Unset optional fields mean "leave unchanged"

Design Decisions:
    - Text lengths validated here so the gateway rejects bad input
      before it reaches the backend
"""

from pydantic import Field, field_validator

from ewm.core.domain_types import EventState
from ewm.schemas.category import CategoryDto
from ewm.schemas.common import CamelModel, EwmDateTime
from ewm.schemas.user import UserShortDto


class LocationDto(CamelModel):
    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)


class _EventTextFields(CamelModel):
    """Shared non-blank check for annotation/description/title."""

    @field_validator("annotation", "description", "title", check_fields=False)
    @classmethod
    def not_blank(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("value cannot be empty or whitespace")
        return v


class NewEventDto(_EventTextFields):
    annotation: str = Field(min_length=20, max_length=2000)
    category: int = Field(gt=0)
    description: str = Field(min_length=20, max_length=7000)
    event_date: EwmDateTime
    location: LocationDto
    paid: bool = False
    participant_limit: int = Field(0, ge=0)
    request_moderation: bool = True
    title: str = Field(min_length=3, max_length=120)


class UpdateEventRequest(_EventTextFields):
    event_id: int = Field(gt=0)
    annotation: str | None = Field(None, min_length=20, max_length=2000)
    category: int | None = Field(None, gt=0)
    description: str | None = Field(None, min_length=20, max_length=7000)
    event_date: EwmDateTime | None = None
    paid: bool | None = None
    participant_limit: int | None = Field(None, ge=0)
    title: str | None = Field(None, min_length=3, max_length=120)


class AdminUpdateEventRequest(_EventTextFields):
    annotation: str | None = Field(None, min_length=20, max_length=2000)
    category: int | None = Field(None, gt=0)
    description: str | None = Field(None, min_length=20, max_length=7000)
    event_date: EwmDateTime | None = None
    location: LocationDto | None = None
    paid: bool | None = None
    participant_limit: int | None = Field(None, ge=0)
    request_moderation: bool | None = None
    title: str | None = Field(None, min_length=3, max_length=120)


class EventShortDto(CamelModel):
    id: int
    annotation: str
    category: CategoryDto
    confirmed_requests: int
    event_date: EwmDateTime
    initiator: UserShortDto
    paid: bool
    title: str
    views: int


class EventFullDto(EventShortDto):
    created_on: EwmDateTime
    description: str
    location: LocationDto
    participant_limit: int
    published_on: EwmDateTime | None = None
    request_moderation: bool
    state: EventState
