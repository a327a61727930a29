"""Event Query Builder — turns an EventFilter into a single SQLAlchemy SELECT.

Invariants:
    - Text search is case-insensitive over annotation and description
    - only_available keeps unlimited events and events with free seats
    - Ordering: VIEWS desc, EVENT_DATE asc, otherwise id asc (stable pagination)
"""

from sqlalchemy import Select, or_

from ewm.core.domain_types import EventSort
from ewm.core.event_filter import EventFilter
from ewm.core.pagination import make_page
from ewm.models import Event


def apply_event_filter(query: Select, f: EventFilter) -> Select:
    """Add WHERE, ORDER BY and LIMIT/OFFSET for `f` to a SELECT over Event."""
    f.validate()

    if f.text:
        pattern = f"%{f.text}%"
        query = query.where(or_(
            Event.annotation.ilike(pattern),
            Event.description.ilike(pattern),
        ))
    if f.categories:
        query = query.where(Event.category_id.in_(f.categories))
    if f.paid is not None:
        query = query.where(Event.paid.is_(f.paid))
    if f.range_start is not None:
        query = query.where(Event.event_date >= f.range_start)
    if f.range_end is not None:
        query = query.where(Event.event_date <= f.range_end)
    if f.only_available:
        query = query.where(or_(
            Event.participant_limit == 0,
            Event.confirmed_requests < Event.participant_limit,
        ))
    if f.users:
        query = query.where(Event.initiator_id.in_(f.users))
    if f.states:
        query = query.where(Event.state.in_([s.value for s in f.states]))

    if f.sort == EventSort.VIEWS:
        query = query.order_by(Event.views.desc(), Event.id)
    elif f.sort == EventSort.EVENT_DATE:
        query = query.order_by(Event.event_date, Event.id)
    else:
        query = query.order_by(Event.id)

    page = make_page(f.from_, f.size)
    return query.offset(page.offset).limit(page.limit)
