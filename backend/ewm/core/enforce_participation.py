"""Participation Enforcement — pure checks for participation requests.

Invariants:
    - Initiators cannot request participation in their own events
    - Only PUBLISHED events accept requests
    - Requests to a full event are refused
    - A request is confirmed immediately when the event needs no moderation
      or has no participant limit
"""

from ewm.core.domain_types import EventState, RequestStatus
from ewm.core.enforce_events import is_limit_reached
from ewm.core.errors import RequestConditionError


def check_can_request(
    requester_id: int,
    initiator_id: int,
    state: EventState,
    participant_limit: int,
    confirmed: int,
) -> None:
    if requester_id == initiator_id:
        raise RequestConditionError(
            "Initiator cannot request participation in own event",
        )
    if state != EventState.PUBLISHED:
        raise RequestConditionError(
            "Cannot participate in an unpublished event",
        )
    if is_limit_reached(participant_limit, confirmed):
        raise RequestConditionError("The participant limit has been reached")


def initial_status(request_moderation: bool, participant_limit: int) -> RequestStatus:
    if not request_moderation or participant_limit == 0:
        return RequestStatus.CONFIRMED
    return RequestStatus.PENDING


def check_can_decide(status: RequestStatus) -> None:
    """Initiator may confirm or reject only pending requests."""
    if status != RequestStatus.PENDING:
        raise RequestConditionError(
            f"Request must have status PENDING, got {status.value}",
        )
