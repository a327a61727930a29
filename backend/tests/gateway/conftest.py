"""Gateway test fixtures — gateway app backed by a scripted or a real main server.

Invariants:
    - `upstream` records every forwarded request and answers as scripted
    - `gateway` talks to `upstream` through httpx.MockTransport (no network)
    - `gateway_e2e` forwards into the real backend app via ASGITransport
    - Retry delays are zero so failure tests stay fast
"""

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from gateway.clients import build_clients
from gateway.config import GatewaySettings
from gateway.main import app as gateway_app


class Upstream:
    """Scripted main server."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.json: object = {"ok": True}
        self.failures_left = 0
        self.error: type[httpx.TransportError] = httpx.ConnectError

    def reply(self, status_code: int, json: object) -> None:
        self.status_code = status_code
        self.json = json

    def fail(
        self, times: int, error: type[httpx.TransportError] = httpx.ConnectError,
    ) -> None:
        """Fail the next `times` requests with `error` (refused connection by default)."""
        self.failures_left = times
        self.error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.failures_left > 0:
            self.failures_left -= 1
            raise self.error("Main server failure", request=request)
        return httpx.Response(self.status_code, json=self.json)


@pytest.fixture
def gateway_settings():
    return GatewaySettings(
        main_server_url="http://main-server:9090/",
        main_server_max_retries=2,
        main_server_retry_base_delay_ms=0,
    )


@pytest.fixture
def upstream():
    return Upstream()


async def _serve(clients):
    gateway_app.state.clients = clients
    async with AsyncClient(
        transport=ASGITransport(app=gateway_app), base_url="http://gateway",
    ) as c:
        yield c
    await clients.close()
    del gateway_app.state.clients


@pytest.fixture
async def gateway(upstream, gateway_settings):
    clients = build_clients(gateway_settings, transport=httpx.MockTransport(upstream.handler))
    async for c in _serve(clients):
        yield c


@pytest.fixture
async def gateway_e2e(backend_app, gateway_settings):
    clients = build_clients(gateway_settings, transport=ASGITransport(app=backend_app))
    async for c in _serve(clients):
        yield c
