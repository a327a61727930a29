"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - All valid states encoded as Enums — no raw string matching
    - Default group titles are upper-case (groups are stored upper-case)

Design Decisions:
    - str Enums: serialize to JSON without custom encoders, stored as plain strings in DB
"""

from enum import Enum


# ─── Constants ───────────────────────────────────────────────────

DATETIME_FORMAT: str = "%Y-%m-%d %H:%M:%S"

FOLLOWER_GROUP: str = "FOLLOWER"
FRIENDS_ALL_GROUP: str = "FRIENDS_ALL"
DEFAULT_GROUPS: tuple[str, ...] = (FOLLOWER_GROUP, FRIENDS_ALL_GROUP)


# ─── Enums ───────────────────────────────────────────────────────

class EventState(str, Enum):
    """Event lifecycle — PENDING until an admin publishes or it is canceled."""
    PENDING = "PENDING"
    PUBLISHED = "PUBLISHED"
    CANCELED = "CANCELED"


class RequestStatus(str, Enum):
    """Participation request states."""
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    REJECTED = "REJECTED"
    CANCELED = "CANCELED"


class SubscriptionStatus(str, Enum):
    """Subscription request states.

    From WAITING the publisher accepts (CONSIDER) or cancels (CANCELED),
    the follower revokes (REVOKE). Unsubscribing revokes an accepted request.
    """
    WAITING = "WAITING"
    CONSIDER = "CONSIDER"
    CANCELED = "CANCELED"
    REVOKE = "REVOKE"


class EventSort(str, Enum):
    """Sort orders for event listings."""
    EVENT_DATE = "EVENT_DATE"
    VIEWS = "VIEWS"
