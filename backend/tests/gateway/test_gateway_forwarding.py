"""Gateway forwarding — validate, forward unchanged, pass the answer through.

Invariants:
    - Invalid path/query/body → 400 and nothing reaches the main server
    - Method, path, query string and camelCase body are forwarded as received
    - Upstream status and JSON body come back unchanged, errors included
    - Connection failures (refused or connect timeout) are retried, then answered with 502
    - Other timeouts are answered with 502 at once
"""

import json

import httpx

from tests.factories import at, new_event_body


# ─── Validation ─────────────────────────────────────────────────

async def test_invalid_user_body_not_forwarded(gateway, upstream):
    res = await gateway.post("/admin/users", json={"name": "A", "email": "nope"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
    assert upstream.requests == []


async def test_invalid_paging_not_forwarded(gateway, upstream):
    res = await gateway.get("/events", params={"size": 0})
    assert res.status_code == 400
    assert upstream.requests == []


async def test_inverted_range_not_forwarded(gateway, upstream):
    res = await gateway.get(
        "/events", params={"rangeStart": at(10), "rangeEnd": at(1)},
    )
    assert res.status_code == 400
    assert upstream.requests == []


async def test_event_with_short_annotation_not_forwarded(gateway, upstream):
    res = await gateway.post("/users/1/events", json=new_event_body(1, annotation="short"))
    assert res.status_code == 400
    assert upstream.requests == []


async def test_request_without_event_id_not_forwarded(gateway, upstream):
    res = await gateway.post("/users/1/requests")
    assert res.status_code == 400
    assert upstream.requests == []


async def test_unknown_subscription_status_not_forwarded(gateway, upstream):
    res = await gateway.get("/users/1/subscriptions/incoming", params={"status": "MAYBE"})
    assert res.status_code == 400
    assert upstream.requests == []


# ─── Forwarding ─────────────────────────────────────────────────

async def test_forwards_path_under_area_prefix(gateway, upstream):
    await gateway.patch("/admin/events/5/publish")
    sent = upstream.requests[0]
    assert sent.method == "PATCH"
    assert str(sent.url) == "http://main-server:9090/admin/events/5/publish"


async def test_forwards_query_string(gateway, upstream):
    await gateway.get("/admin/users", params=[("ids", 1), ("ids", 2), ("from", 0), ("size", 5)])
    sent = upstream.requests[0]
    assert sent.url.path == "/admin/users"
    assert sent.url.params.get_list("ids") == ["1", "2"]
    assert sent.url.params["size"] == "5"


async def test_forwards_camel_case_body(gateway, upstream):
    body = new_event_body(3, participantLimit=4, eventDate="2031-02-03 10:00:00")
    await gateway.post("/users/7/events", json=body)
    sent = json.loads(upstream.requests[0].content)
    assert sent["participantLimit"] == 4
    assert sent["eventDate"] == "2031-02-03 10:00:00"
    assert sent["location"] == {"lat": 55.75, "lon": 37.62}


async def test_public_paths_have_no_prefix(gateway, upstream):
    await gateway.get("/compilations", params={"pinned": "true"})
    assert upstream.requests[0].url.path == "/compilations"


async def test_upstream_answer_passed_through(gateway, upstream):
    upstream.reply(201, {"id": 1, "name": "Ann", "email": "ann@mail.test"})
    res = await gateway.post("/admin/users", json={"name": "Ann", "email": "ann@mail.test"})
    assert res.status_code == 201
    assert res.json() == {"id": 1, "name": "Ann", "email": "ann@mail.test"}


async def test_upstream_error_passed_through(gateway, upstream):
    upstream.reply(409, {"error": {"code": "CONFLICT", "message": "taken"}})
    res = await gateway.post("/admin/categories", json={"name": "Concerts"})
    assert res.status_code == 409
    assert res.json()["error"]["message"] == "taken"


# ─── Failures ───────────────────────────────────────────────────

async def test_transient_failure_retried(gateway, upstream):
    upstream.fail(2)
    res = await gateway.get("/categories")
    assert res.status_code == 200
    assert len(upstream.requests) == 3


async def test_connect_timeout_retried(gateway, upstream):
    upstream.fail(1, httpx.ConnectTimeout)
    res = await gateway.get("/categories")
    assert res.status_code == 200
    assert len(upstream.requests) == 2


async def test_read_timeout_returns_502_without_retry(gateway, upstream):
    upstream.fail(1, httpx.ReadTimeout)
    res = await gateway.get("/categories")
    assert res.status_code == 502
    assert res.json()["error"]["code"] == "MAIN_SERVER_UNAVAILABLE"
    assert len(upstream.requests) == 1


async def test_unreachable_server_returns_502(gateway, upstream):
    upstream.fail(10)
    res = await gateway.get("/categories")
    assert res.status_code == 502
    assert res.json()["error"]["code"] == "MAIN_SERVER_UNAVAILABLE"
    assert len(upstream.requests) == 3


async def test_gateway_health(gateway, upstream):
    res = await gateway.get("/health/")
    assert res.status_code == 200
    assert res.json()["service"] == "ewm-gateway"
    assert upstream.requests == []
