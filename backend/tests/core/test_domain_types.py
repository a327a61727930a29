"""Domain Types — verifies constants and enum values.

Tests:
    - Enums have expected members and serialize to string
    - Default groups are upper-case and FOLLOWER comes first
"""

from ewm.core.domain_types import (
    EventState, RequestStatus, SubscriptionStatus, EventSort,
    DEFAULT_GROUPS, FOLLOWER_GROUP, FRIENDS_ALL_GROUP, DATETIME_FORMAT,
)


def test_event_state_has_three_states():
    assert set(EventState) == {
        EventState.PENDING, EventState.PUBLISHED, EventState.CANCELED,
    }


def test_request_status_values():
    assert [s.value for s in RequestStatus] == [
        "PENDING", "CONFIRMED", "REJECTED", "CANCELED",
    ]


def test_subscription_status_values():
    assert [s.value for s in SubscriptionStatus] == [
        "WAITING", "CONSIDER", "CANCELED", "REVOKE",
    ]


def test_enums_are_strings():
    assert EventState.PUBLISHED == "PUBLISHED"
    assert EventSort("VIEWS") is EventSort.VIEWS


def test_default_groups():
    assert DEFAULT_GROUPS == (FOLLOWER_GROUP, FRIENDS_ALL_GROUP)
    assert all(title == title.upper() for title in DEFAULT_GROUPS)


def test_datetime_format():
    assert DATETIME_FORMAT == "%Y-%m-%d %H:%M:%S"
