"""Event row locking — seat counting reads the event under FOR UPDATE.

Invariants:
    - Locked lookups render SELECT ... FOR UPDATE on PostgreSQL
    - Plain lookups take no lock
    - A locked lookup reloads confirmed_requests even if the event is already in the session
"""

from sqlalchemy import update
from sqlalchemy.dialects import postgresql

from ewm.models import Event
from ewm.services.lookups import event_query, get_event_or_404, get_owned_event_or_404


def _pg_sql(query) -> str:
    return str(query.compile(dialect=postgresql.dialect()))


def test_locked_event_query_renders_for_update():
    assert _pg_sql(event_query(1, for_update=True)).endswith("FOR UPDATE")


def test_owned_locked_event_query_filters_initiator():
    sql = _pg_sql(event_query(1, initiator_id=7, for_update=True))
    assert "events.initiator_id" in sql
    assert sql.endswith("FOR UPDATE")


def test_plain_event_query_takes_no_lock():
    assert "FOR UPDATE" not in _pg_sql(event_query(1))


async def test_locked_lookup_sees_fresh_seat_count(initiator, published_event, test_db):
    event = await get_event_or_404(test_db, published_event["id"])
    assert event.confirmed_requests == 0

    await test_db.execute(
        update(Event)
        .where(Event.id == published_event["id"])
        .values(confirmed_requests=3)
        .execution_options(synchronize_session=False)
    )
    locked = await get_owned_event_or_404(
        test_db, initiator["id"], published_event["id"], for_update=True,
    )
    assert locked is event
    assert locked.confirmed_requests == 3
