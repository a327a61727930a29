"""Event Filter — listing criteria shared by admin, public and friend/subscriber views.

Invariants:
    - None means "do not filter on this"
    - range_start must not be after range_end (ValidationFailedError otherwise)

Design Decisions:
    - Lives in core (no SQLAlchemy): the gateway validates the same criteria
      before forwarding, the backend turns them into SQL (services/event_query.py)
"""

from dataclasses import dataclass
from datetime import datetime

from ewm.core.domain_types import EventSort, EventState
from ewm.core.errors import ValidationFailedError


@dataclass
class EventFilter:
    """Listing filter for events."""
    text: str | None = None
    categories: list[int] | None = None
    paid: bool | None = None
    range_start: datetime | None = None
    range_end: datetime | None = None
    only_available: bool = False
    sort: EventSort | None = None
    users: list[int] | None = None
    states: list[EventState] | None = None
    from_: int = 0
    size: int = 10

    def validate(self) -> None:
        if (
            self.range_start is not None
            and self.range_end is not None
            and self.range_start > self.range_end
        ):
            raise ValidationFailedError(
                "rangeStart must not be after rangeEnd", "rangeStart",
            )
