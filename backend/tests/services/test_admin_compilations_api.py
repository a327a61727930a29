"""Compilations API — admin curation and public reads."""

async def _create(client, **body) -> dict:
    body.setdefault("title", "Weekend picks")
    res = await client.post("/admin/compilations", json=body)
    assert res.status_code == 201, res.text
    return res.json()


async def test_add_compilation_with_events(client, published_event):
    compilation = await _create(client, events=[published_event["id"]], pinned=True)
    assert compilation["pinned"] is True
    assert [e["id"] for e in compilation["events"]] == [published_event["id"]]


async def test_add_compilation_with_unknown_event_returns_404(client):
    res = await client.post(
        "/admin/compilations", json={"title": "Broken", "events": [404]},
    )
    assert res.status_code == 404


async def test_add_and_remove_event(client, published_event):
    compilation = await _create(client)
    url = f"/admin/compilations/{compilation['id']}/events/{published_event['id']}"

    res = await client.patch(url)
    assert res.status_code == 200
    res = await client.get(f"/compilations/{compilation['id']}")
    assert [e["id"] for e in res.json()["events"]] == [published_event["id"]]

    res = await client.delete(url)
    assert res.status_code == 204
    res = await client.get(f"/compilations/{compilation['id']}")
    assert res.json()["events"] == []


async def test_remove_absent_event_returns_404(client, published_event):
    compilation = await _create(client)
    res = await client.delete(
        f"/admin/compilations/{compilation['id']}/events/{published_event['id']}",
    )
    assert res.status_code == 404


async def test_pin_and_unpin(client):
    compilation = await _create(client)
    await client.patch(f"/admin/compilations/{compilation['id']}/pin")
    res = await client.get("/compilations", params={"pinned": "true"})
    assert [c["id"] for c in res.json()] == [compilation["id"]]

    res = await client.delete(f"/admin/compilations/{compilation['id']}/pin")
    assert res.status_code == 204
    res = await client.get("/compilations", params={"pinned": "true"})
    assert res.json() == []


async def test_delete_compilation(client):
    compilation = await _create(client)
    res = await client.delete(f"/admin/compilations/{compilation['id']}")
    assert res.status_code == 204
    res = await client.get(f"/compilations/{compilation['id']}")
    assert res.status_code == 404


async def test_blank_title_returns_400(client):
    res = await client.post("/admin/compilations", json={"title": "  "})
    assert res.status_code == 400
