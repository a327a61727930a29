"""Subscription & Friendship-Group Enforcement — who may follow whom, and who sees what.

Invariants:
    - A user cannot subscribe to, or look at friend-only data of, themselves
    - At most one live (non-REVOKE) subscription request per follower/publisher pair
    - WAITING moves to CONSIDER, CANCELED or REVOKE; an accepted (CONSIDER) request
      moves to REVOKE when the follower unsubscribes; CANCELED and REVOKE are terminal
    - Group titles are compared ignoring case and stored upper-case
    - FOLLOWER group = plain subscriber; every other group is a friendship tier
    - A friend sees a participation when it is tagged with the friend's own
      group or with FRIENDS_ALL

Design Decisions:
    - Transition table as a dict: every allowed edge visible in one place
      (ADR: no implicit state machine)
    - Pure functions: the shell loads requests/followers, core decides
"""

from ewm.core.domain_types import (
    SubscriptionStatus, FOLLOWER_GROUP, FRIENDS_ALL_GROUP,
)
from ewm.core.errors import RequestConditionError, ValidationFailedError


_TRANSITIONS: dict[SubscriptionStatus, frozenset[SubscriptionStatus]] = {
    SubscriptionStatus.WAITING: frozenset({
        SubscriptionStatus.CONSIDER,
        SubscriptionStatus.CANCELED,
        SubscriptionStatus.REVOKE,
    }),
    SubscriptionStatus.CONSIDER: frozenset({SubscriptionStatus.REVOKE}),
    SubscriptionStatus.CANCELED: frozenset(),
    SubscriptionStatus.REVOKE: frozenset(),
}


def normalize_group_title(title: str) -> str:
    return title.strip().upper()


def is_friend_group(title: str) -> bool:
    return normalize_group_title(title) != FOLLOWER_GROUP


def check_not_self(follower_id: int, publisher_id: int) -> None:
    if follower_id == publisher_id:
        raise RequestConditionError("No access")


def check_can_subscribe(
    has_live_request: bool, already_following: bool,
) -> None:
    """A new request is allowed only when nothing but revoked requests exist."""
    if has_live_request:
        raise RequestConditionError("Subscription request has already been sent")
    if already_following:
        raise RequestConditionError("Already subscribed to this user")


def check_transition(
    current: SubscriptionStatus, target: SubscriptionStatus,
) -> None:
    if target not in _TRANSITIONS[current]:
        raise RequestConditionError(
            f"Subscription request cannot move from {current.value} to {target.value}",
        )


def resolve_follower_group(friendship: bool, group: str | None) -> str:
    """Group title a newly accepted follower lands in."""
    if not friendship:
        return FOLLOWER_GROUP
    title = normalize_group_title(group) if group else FRIENDS_ALL_GROUP
    if title == FOLLOWER_GROUP:
        raise ValidationFailedError(
            "Friends cannot be placed in the FOLLOWER group", "group",
        )
    return title


def check_friend_access(follower_group: str | None) -> None:
    """Participation history is for friends only."""
    if follower_group is None or not is_friend_group(follower_group):
        raise RequestConditionError("Available to the user's friends only")


def check_subscriber_access(is_follower: bool) -> None:
    if not is_follower:
        raise RequestConditionError("Available to the user's subscribers only")


def visible_participation_groups(follower_group: str) -> frozenset[str]:
    """Participation tags a friend in `follower_group` is allowed to see."""
    return frozenset({normalize_group_title(follower_group), FRIENDS_ALL_GROUP})
