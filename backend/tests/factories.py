"""Test factories — build entities through the public HTTP API.

Design Decisions:
    - Seeding through the API keeps tests honest: default groups, locations
      and state stamps are created the same way production creates them
    - Every helper asserts the expected status so a broken setup fails loudly
"""

from datetime import datetime, timedelta
from itertools import count

from httpx import AsyncClient

from ewm.core.domain_types import DATETIME_FORMAT

_seq = count(1)


def at(hours: float) -> str:
    """Wire datetime `hours` from now (negative for the past)."""
    return (datetime.now() + timedelta(hours=hours)).strftime(DATETIME_FORMAT)


def new_event_body(category_id: int, **overrides) -> dict:
    body = {
        "annotation": "An annotation long enough to pass validation",
        "category": category_id,
        "description": "A description that is also long enough to be valid",
        "eventDate": at(24),
        "location": {"lat": 55.75, "lon": 37.62},
        "paid": False,
        "participantLimit": 0,
        "requestModeration": True,
        "title": "Board games night",
    }
    body.update(overrides)
    return body


async def create_user(client: AsyncClient, name: str = "User") -> dict:
    n = next(_seq)
    res = await client.post(
        "/admin/users", json={"name": f"{name} {n}", "email": f"user{n}@mail.test"},
    )
    assert res.status_code == 201, res.text
    return res.json()


async def create_category(client: AsyncClient, name: str | None = None) -> dict:
    res = await client.post(
        "/admin/categories", json={"name": name or f"Category {next(_seq)}"},
    )
    assert res.status_code == 201, res.text
    return res.json()


async def create_event(
    client: AsyncClient, user_id: int, category_id: int, **overrides,
) -> dict:
    res = await client.post(
        f"/users/{user_id}/events", json=new_event_body(category_id, **overrides),
    )
    assert res.status_code == 201, res.text
    return res.json()


async def create_published_event(
    client: AsyncClient, user_id: int, category_id: int, **overrides,
) -> dict:
    event = await create_event(client, user_id, category_id, **overrides)
    res = await client.patch(f"/admin/events/{event['id']}/publish")
    assert res.status_code == 200, res.text
    return res.json()


async def request_participation(
    client: AsyncClient, user_id: int, event_id: int, group: str | None = None,
) -> dict:
    params = {"eventId": event_id}
    if group is not None:
        params["group"] = group
    res = await client.post(f"/users/{user_id}/requests", params=params)
    assert res.status_code == 201, res.text
    return res.json()


async def subscribe(
    client: AsyncClient, follower_id: int, publisher_id: int,
    friendship: bool = False, message: str | None = None,
) -> dict:
    res = await client.post(
        f"/users/{follower_id}/subscriptions",
        params={"publisherId": publisher_id},
        json={"friendship": friendship, "message": message},
    )
    assert res.status_code == 201, res.text
    return res.json()


async def follow(
    client: AsyncClient, follower_id: int, publisher_id: int,
    friendship: bool = False, group: str | None = None,
) -> dict:
    """Subscribe and have the publisher accept, landing in `group`."""
    request = await subscribe(client, follower_id, publisher_id, friendship)
    params = {}
    if group is not None:
        params["group"] = group
    res = await client.patch(
        f"/users/{publisher_id}/subscriptions/{request['id']}/accept", params=params,
    )
    assert res.status_code == 200, res.text
    return res.json()
