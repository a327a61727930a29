"""Event Lifecycle Enforcement — pure checks for event state transitions and dates.

Invariants:
    - Owners may only edit PENDING or CANCELED events
    - Owners may only cancel PENDING events
    - Admins may only publish PENDING events, at least MIN_HOURS_BEFORE_PUBLISH ahead
    - Published events cannot be rejected
    - participant_limit == 0 means unlimited

Design Decisions:
    - Pure functions raising typed errors: services call them after loading
      entities, before mutating (ADR: functional core, imperative shell)
    - `now` is always passed in: deterministic tests, no clock in core
"""

from datetime import datetime, timedelta

from ewm.core.domain_types import EventState
from ewm.core.errors import RequestConditionError, ValidationFailedError


MIN_HOURS_BEFORE_EVENT: int = 2
MIN_HOURS_BEFORE_PUBLISH: int = 1

_OWNER_EDITABLE_STATES = frozenset({EventState.PENDING, EventState.CANCELED})


def check_event_date(
    event_date: datetime, now: datetime, min_hours: int = MIN_HOURS_BEFORE_EVENT,
) -> None:
    """Event must start at least `min_hours` after `now`."""
    if event_date < now + timedelta(hours=min_hours):
        raise ValidationFailedError(
            f"Event date must be at least {min_hours} hour(s) from now: {event_date}",
            "eventDate",
        )


def check_owner_can_update(state: EventState) -> None:
    if state not in _OWNER_EDITABLE_STATES:
        raise RequestConditionError(
            "Only pending or canceled events can be changed",
        )


def check_owner_can_cancel(state: EventState) -> None:
    if state == EventState.PUBLISHED:
        raise RequestConditionError("Published events cannot be canceled")
    if state == EventState.CANCELED:
        raise RequestConditionError("Event is already canceled")


def check_can_publish(
    state: EventState,
    event_date: datetime,
    now: datetime,
    min_hours: int = MIN_HOURS_BEFORE_PUBLISH,
) -> None:
    """Rule: only PENDING events, starting at least `min_hours` after publication."""
    if state != EventState.PENDING:
        raise RequestConditionError(
            f"Cannot publish the event because it's not in the right state: {state.value}",
        )
    if event_date < now + timedelta(hours=min_hours):
        raise RequestConditionError(
            f"Event must start at least {min_hours} hour(s) after publication",
        )


def check_can_reject(state: EventState) -> None:
    if state == EventState.PUBLISHED:
        raise RequestConditionError("Published events cannot be rejected")


def is_limit_reached(participant_limit: int, confirmed: int) -> bool:
    """True when a limited event has no free seats left."""
    return participant_limit != 0 and confirmed >= participant_limit
