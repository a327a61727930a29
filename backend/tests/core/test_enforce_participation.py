"""Participation Enforcement — who may request, and the initial status."""

import pytest

from ewm.core.domain_types import EventState, RequestStatus
from ewm.core.enforce_participation import (
    check_can_decide, check_can_request, initial_status,
)
from ewm.core.errors import RequestConditionError


def test_request_to_published_event_with_seats():
    check_can_request(1, 2, EventState.PUBLISHED, 10, 3)


def test_initiator_cannot_request_own_event():
    with pytest.raises(RequestConditionError, match="own event"):
        check_can_request(1, 1, EventState.PUBLISHED, 0, 0)


@pytest.mark.parametrize("state", [EventState.PENDING, EventState.CANCELED])
def test_unpublished_event_refused(state):
    with pytest.raises(RequestConditionError, match="unpublished"):
        check_can_request(1, 2, state, 0, 0)


def test_full_event_refused():
    with pytest.raises(RequestConditionError, match="limit"):
        check_can_request(1, 2, EventState.PUBLISHED, 2, 2)


def test_unlimited_event_never_full():
    check_can_request(1, 2, EventState.PUBLISHED, 0, 500)


# ─── initial_status ─────────────────────────────────────────────

def test_moderated_limited_event_starts_pending():
    assert initial_status(True, 5) == RequestStatus.PENDING


def test_unmoderated_event_confirms_at_once():
    assert initial_status(False, 5) == RequestStatus.CONFIRMED


def test_unlimited_event_confirms_at_once_even_if_moderated():
    assert initial_status(True, 0) == RequestStatus.CONFIRMED


# ─── check_can_decide ───────────────────────────────────────────

def test_pending_request_can_be_decided():
    check_can_decide(RequestStatus.PENDING)


@pytest.mark.parametrize(
    "status",
    [RequestStatus.CONFIRMED, RequestStatus.REJECTED, RequestStatus.CANCELED],
)
def test_decided_request_cannot_be_decided_again(status):
    with pytest.raises(RequestConditionError):
        check_can_decide(status)
