"""Event Enforcement — tests for pure event lifecycle and date rules.

Tests cover:
    - check_event_date enforces the minimum lead time
    - owners edit PENDING/CANCELED only and cancel PENDING only
    - publish requires PENDING and a one-hour lead
    - reject refuses PUBLISHED events
    - is_limit_reached treats 0 as unlimited
"""

from datetime import datetime, timedelta

import pytest

from ewm.core.domain_types import EventState
from ewm.core.enforce_events import (
    check_can_publish,
    check_can_reject,
    check_event_date,
    check_owner_can_cancel,
    check_owner_can_update,
    is_limit_reached,
    MIN_HOURS_BEFORE_EVENT,
)
from ewm.core.errors import RequestConditionError, ValidationFailedError

NOW = datetime(2030, 1, 1, 12, 0, 0)


# ─── check_event_date ────────────────────────────────────────────

def test_event_date_exactly_at_limit_passes():
    check_event_date(NOW + timedelta(hours=MIN_HOURS_BEFORE_EVENT), NOW)


def test_event_date_too_soon_rejected():
    with pytest.raises(ValidationFailedError) as exc:
        check_event_date(NOW + timedelta(hours=1, minutes=59), NOW)
    assert exc.value.field == "eventDate"
    assert exc.value.http_status == 400


def test_event_date_custom_lead_time():
    check_event_date(NOW + timedelta(minutes=61), NOW, min_hours=1)


# ─── Owner rules ─────────────────────────────────────────────────

@pytest.mark.parametrize("state", [EventState.PENDING, EventState.CANCELED])
def test_owner_can_update_editable_states(state):
    check_owner_can_update(state)


def test_owner_cannot_update_published():
    with pytest.raises(RequestConditionError):
        check_owner_can_update(EventState.PUBLISHED)


def test_owner_can_cancel_pending():
    check_owner_can_cancel(EventState.PENDING)


def test_owner_cannot_cancel_published():
    with pytest.raises(RequestConditionError, match="Published"):
        check_owner_can_cancel(EventState.PUBLISHED)


def test_owner_cannot_cancel_twice():
    with pytest.raises(RequestConditionError, match="already canceled"):
        check_owner_can_cancel(EventState.CANCELED)


# ─── Admin rules ─────────────────────────────────────────────────

def test_publish_pending_event():
    check_can_publish(EventState.PENDING, NOW + timedelta(hours=2), NOW)


@pytest.mark.parametrize("state", [EventState.PUBLISHED, EventState.CANCELED])
def test_publish_requires_pending(state):
    with pytest.raises(RequestConditionError) as exc:
        check_can_publish(state, NOW + timedelta(days=1), NOW)
    assert exc.value.http_status == 403


def test_publish_requires_one_hour_lead():
    with pytest.raises(RequestConditionError):
        check_can_publish(EventState.PENDING, NOW + timedelta(minutes=59), NOW)


def test_reject_published_refused():
    with pytest.raises(RequestConditionError):
        check_can_reject(EventState.PUBLISHED)


@pytest.mark.parametrize("state", [EventState.PENDING, EventState.CANCELED])
def test_reject_allowed(state):
    check_can_reject(state)


# ─── is_limit_reached ───────────────────────────────────────────

def test_zero_limit_is_unlimited():
    assert is_limit_reached(0, 1000) is False


def test_limit_reached_when_full():
    assert is_limit_reached(2, 2) is True


def test_limit_not_reached_with_free_seat():
    assert is_limit_reached(2, 1) is False
