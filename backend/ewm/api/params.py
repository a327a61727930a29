"""Query Parameter Dependencies — parse and validate listing parameters once.

Invariants:
    - `from` >= 0 and `size` > 0 on every paged endpoint
    - A returned EventFilter is already validated (range order checked)

Design Decisions:
    - Shared with the gateway: it validates with the same dependencies,
      then forwards the original query string untouched
"""

from fastapi import Query

from ewm.core.domain_types import EventSort, EventState
from ewm.core.event_filter import EventFilter
from ewm.schemas.common import EwmDateTime


def event_filter_params(
    text: str | None = Query(None, max_length=7000),
    categories: list[int] | None = Query(None),
    paid: bool | None = Query(None),
    range_start: EwmDateTime | None = Query(None, alias="rangeStart"),
    range_end: EwmDateTime | None = Query(None, alias="rangeEnd"),
    only_available: bool = Query(False, alias="onlyAvailable"),
    sort: EventSort | None = Query(None),
    from_: int = Query(0, ge=0, alias="from"),
    size: int = Query(10, gt=0),
) -> EventFilter:
    """Filter exposed to users browsing events."""
    f = EventFilter(
        text=text, categories=categories, paid=paid,
        range_start=range_start, range_end=range_end,
        only_available=only_available, sort=sort,
        from_=from_, size=size,
    )
    f.validate()
    return f


def admin_event_filter_params(
    users: list[int] | None = Query(None),
    states: list[EventState] | None = Query(None),
    categories: list[int] | None = Query(None),
    range_start: EwmDateTime | None = Query(None, alias="rangeStart"),
    range_end: EwmDateTime | None = Query(None, alias="rangeEnd"),
    from_: int = Query(0, ge=0, alias="from"),
    size: int = Query(10, gt=0),
) -> EventFilter:
    """Filter exposed to administrators."""
    f = EventFilter(
        users=users, states=states, categories=categories,
        range_start=range_start, range_end=range_end,
        from_=from_, size=size,
    )
    f.validate()
    return f
