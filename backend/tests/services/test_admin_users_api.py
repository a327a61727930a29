"""Admin Users API — registration, listing and removal.

Invariants:
    - POST returns 201 and creates FOLLOWER + FRIENDS_ALL groups
    - Duplicate email (ignoring case) → 409
    - Users who initiated events cannot be deleted (403)
    - Deleting a user removes their requests, subscriptions, follower links
      and groups, and gives back the seats they held
"""

from sqlalchemy import select

from ewm.models import FriendshipGroup, ParticipationRequest
from tests.factories import (
    create_category, create_event, create_published_event, create_user, follow,
    request_participation, subscribe,
)


async def test_add_user_returns_201(client):
    res = await client.post(
        "/admin/users", json={"name": "Ann", "email": "ann@mail.test"},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["name"] == "Ann"
    assert body["email"] == "ann@mail.test"
    assert isinstance(body["id"], int)


async def test_add_user_creates_default_groups(client):
    user = await create_user(client)
    res = await client.get(f"/users/{user['id']}/groups")
    assert [g["title"] for g in res.json()] == ["FOLLOWER", "FRIENDS_ALL"]


async def test_duplicate_email_returns_409(client):
    await client.post("/admin/users", json={"name": "Ann", "email": "ann@mail.test"})
    res = await client.post(
        "/admin/users", json={"name": "Other", "email": "ANN@mail.test"},
    )
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "CONFLICT"


async def test_invalid_email_returns_400(client):
    res = await client.post("/admin/users", json={"name": "Ann", "email": "ann"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_get_users_by_ids(client):
    a = await create_user(client)
    await create_user(client)
    c = await create_user(client)
    res = await client.get("/admin/users", params=[("ids", a["id"]), ("ids", c["id"])])
    assert [u["id"] for u in res.json()] == [a["id"], c["id"]]


async def test_get_users_paged(client):
    users = [await create_user(client) for _ in range(5)]
    res = await client.get("/admin/users", params={"from": 2, "size": 2})
    assert [u["id"] for u in res.json()] == [users[2]["id"], users[3]["id"]]


async def test_get_users_rejects_zero_size(client):
    res = await client.get("/admin/users", params={"size": 0})
    assert res.status_code == 400


async def test_delete_user(client):
    user = await create_user(client)
    res = await client.delete(f"/admin/users/{user['id']}")
    assert res.status_code == 204
    res = await client.get("/admin/users", params={"ids": user["id"]})
    assert res.json() == []


async def test_delete_user_removes_everything_they_own(client, test_db):
    alice = await create_user(client, "Alice")
    bob = await create_user(client, "Bob")
    carl = await create_user(client, "Carl")
    dave = await create_user(client, "Dave")
    category = await create_category(client)
    event = await create_published_event(
        client, bob["id"], category["id"], participantLimit=2, requestModeration=False,
    )
    joined = await request_participation(client, alice["id"], event["id"])
    assert joined["status"] == "CONFIRMED"
    await follow(client, alice["id"], bob["id"])
    await follow(client, carl["id"], alice["id"], friendship=True)
    await subscribe(client, alice["id"], dave["id"])
    res = await client.post(f"/users/{alice['id']}/groups", json={"title": "close"})
    assert res.status_code == 201

    res = await client.delete(f"/admin/users/{alice['id']}")
    assert res.status_code == 204

    res = await client.get(f"/events/{event['id']}")
    assert res.json()["confirmedRequests"] == 0
    res = await client.get(f"/users/{bob['id']}/followers")
    assert res.json() == []
    res = await client.get(f"/users/{carl['id']}/publishers")
    assert res.json() == []
    res = await client.get(f"/users/{dave['id']}/subscriptions/incoming")
    assert res.json() == []
    requests = await test_db.execute(
        select(ParticipationRequest).where(ParticipationRequest.requester_id == alice["id"]),
    )
    assert requests.scalars().all() == []
    groups = await test_db.execute(
        select(FriendshipGroup).where(FriendshipGroup.user_id == alice["id"]),
    )
    assert groups.scalars().all() == []


async def test_delete_user_frees_seat_on_full_event(client):
    owner = await create_user(client)
    ann = await create_user(client)
    bob = await create_user(client)
    category = await create_category(client)
    event = await create_published_event(
        client, owner["id"], category["id"], participantLimit=1, requestModeration=False,
    )
    await request_participation(client, ann["id"], event["id"])
    res = await client.post(f"/users/{bob['id']}/requests", params={"eventId": event["id"]})
    assert res.status_code == 403

    await client.delete(f"/admin/users/{ann['id']}")
    joined = await request_participation(client, bob["id"], event["id"])
    assert joined["status"] == "CONFIRMED"


async def test_delete_missing_user_returns_404(client):
    res = await client.delete("/admin/users/999")
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "User with id=999 was not found"


async def test_delete_user_with_events_returns_403(client):
    user = await create_user(client)
    category = await create_category(client)
    await create_event(client, user["id"], category["id"])
    res = await client.delete(f"/admin/users/{user['id']}")
    assert res.status_code == 403
