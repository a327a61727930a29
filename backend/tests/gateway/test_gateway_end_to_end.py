"""Gateway end-to-end — the gateway in front of the real backend app."""


async def test_user_registration_through_gateway(gateway_e2e):
    res = await gateway_e2e.post(
        "/admin/users", json={"name": "Ann", "email": "ann@mail.test"},
    )
    assert res.status_code == 201
    user = res.json()

    res = await gateway_e2e.get("/admin/users", params={"ids": user["id"]})
    assert res.json() == [user]


async def test_backend_errors_reach_client(gateway_e2e):
    res = await gateway_e2e.delete("/admin/users/999")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_subscription_flow_through_gateway(gateway_e2e):
    ann = (await gateway_e2e.post(
        "/admin/users", json={"name": "Ann", "email": "ann@mail.test"},
    )).json()
    bob = (await gateway_e2e.post(
        "/admin/users", json={"name": "Bob", "email": "bob@mail.test"},
    )).json()

    res = await gateway_e2e.post(
        f"/users/{ann['id']}/subscriptions",
        params={"publisherId": bob["id"]},
        json={"friendship": True},
    )
    assert res.status_code == 201
    request = res.json()

    res = await gateway_e2e.patch(
        f"/users/{bob['id']}/subscriptions/{request['id']}/accept",
    )
    assert res.json()["status"] == "CONSIDER"

    res = await gateway_e2e.delete(f"/users/{ann['id']}/publishers/{bob['id']}")
    assert res.status_code == 204
