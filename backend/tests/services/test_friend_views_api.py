"""Friend & subscriber views — what followers may see of a publisher's events.

Invariants:
    - Participation history: friends only (any group but FOLLOWER), and only
      confirmed participations tagged with the friend's group or FRIENDS_ALL
    - Created events: any follower, PUBLISHED events only
    - Looking at yourself → 403; unknown publisher → 404
"""

from tests.factories import (
    at, create_event, create_published_event, create_user, follow, request_participation,
)


PARTICIPATING = "/users/{follower}/publishers/{publisher}/events/participating"
CREATED = "/users/{follower}/publishers/{publisher}/events/created"


async def _participating(client, follower, publisher, **params):
    return await client.get(
        PARTICIPATING.format(follower=follower["id"], publisher=publisher["id"]),
        params=params,
    )


async def test_friend_sees_friends_all_participation(client, published_event):
    bob = await create_user(client)
    ann = await create_user(client)
    await follow(client, ann["id"], bob["id"], friendship=True)
    await request_participation(client, bob["id"], published_event["id"])

    res = await _participating(client, ann, bob)
    assert res.status_code == 200
    assert [e["id"] for e in res.json()] == [published_event["id"]]


async def test_group_tag_limits_visibility(client, initiator, category):
    bob = await create_user(client)
    family_member = await create_user(client)
    other_friend = await create_user(client)
    await client.post(f"/users/{bob['id']}/groups", json={"title": "family"})
    await follow(client, family_member["id"], bob["id"], friendship=True, group="family")
    await follow(client, other_friend["id"], bob["id"], friendship=True)

    family_event = await create_published_event(client, initiator["id"], category["id"])
    open_event = await create_published_event(client, initiator["id"], category["id"])
    await request_participation(client, bob["id"], family_event["id"], group="family")
    await request_participation(client, bob["id"], open_event["id"])

    res = await _participating(client, family_member, bob)
    assert [e["id"] for e in res.json()] == [family_event["id"], open_event["id"]]

    res = await _participating(client, other_friend, bob)
    assert [e["id"] for e in res.json()] == [open_event["id"]]


async def test_unconfirmed_participation_hidden(client, initiator, category):
    bob = await create_user(client)
    ann = await create_user(client)
    await follow(client, ann["id"], bob["id"], friendship=True)
    event = await create_published_event(
        client, initiator["id"], category["id"], participantLimit=5,
    )
    await request_participation(client, bob["id"], event["id"])

    res = await _participating(client, ann, bob)
    assert res.json() == []


async def test_plain_follower_denied_participation(client):
    bob = await create_user(client)
    ann = await create_user(client)
    await follow(client, ann["id"], bob["id"])
    res = await _participating(client, ann, bob)
    assert res.status_code == 403
    assert res.json()["error"]["message"] == "Available to the user's friends only"


async def test_stranger_denied_participation(client):
    bob = await create_user(client)
    ann = await create_user(client)
    res = await _participating(client, ann, bob)
    assert res.status_code == 403


async def test_self_view_denied(client):
    bob = await create_user(client)
    res = await _participating(client, bob, bob)
    assert res.status_code == 403
    assert res.json()["error"]["message"] == "No access"


async def test_unknown_publisher_returns_404(client):
    ann = await create_user(client)
    res = await _participating(client, ann, {"id": 999})
    assert res.status_code == 404


async def test_participation_filtered_by_text(client, initiator, category):
    bob = await create_user(client)
    ann = await create_user(client)
    await follow(client, ann["id"], bob["id"], friendship=True)
    jazz = await create_published_event(
        client, initiator["id"], category["id"],
        annotation="An evening of JAZZ standards by the river",
    )
    chess = await create_published_event(client, initiator["id"], category["id"])
    await request_participation(client, bob["id"], jazz["id"])
    await request_participation(client, bob["id"], chess["id"])

    res = await _participating(client, ann, bob, text="jazz")
    assert [e["id"] for e in res.json()] == [jazz["id"]]


# ─── Created events ─────────────────────────────────────────────

async def test_follower_sees_published_created_events(client, category):
    bob = await create_user(client)
    ann = await create_user(client)
    await follow(client, ann["id"], bob["id"])
    published = await create_published_event(client, bob["id"], category["id"])
    await create_event(client, bob["id"], category["id"])

    res = await client.get(CREATED.format(follower=ann["id"], publisher=bob["id"]))
    assert res.status_code == 200
    assert [e["id"] for e in res.json()] == [published["id"]]


async def test_stranger_denied_created_events(client):
    bob = await create_user(client)
    ann = await create_user(client)
    res = await client.get(CREATED.format(follower=ann["id"], publisher=bob["id"]))
    assert res.status_code == 403
    assert res.json()["error"]["message"] == "Available to the user's subscribers only"


async def test_created_events_paged_and_sorted(client, category):
    bob = await create_user(client)
    ann = await create_user(client)
    await follow(client, ann["id"], bob["id"])
    await create_published_event(client, bob["id"], category["id"], eventDate=at(72))
    early = await create_published_event(client, bob["id"], category["id"], eventDate=at(12))

    res = await client.get(
        CREATED.format(follower=ann["id"], publisher=bob["id"]),
        params={"sort": "EVENT_DATE", "from": 0, "size": 1},
    )
    assert [e["id"] for e in res.json()] == [early["id"]]
