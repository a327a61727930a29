"""Main Server Clients — one resilient httpx client per API area.

Invariants:
    - Every client targets MAIN_SERVER_URL + its area prefix
    - Upstream status code and body are passed through unchanged, errors included
    - Connection failures (refused or connect timeout): up to max_retries retries
      with exponential backoff, then MainServerUnavailableError (502)
    - Read, write and pool timeouts fail immediately with MainServerUnavailableError
      (the request may already be running upstream)

Design Decisions:
    - The prefix is joined to the path by hand: httpx appends a slash to a
      base_url path, which the main server would answer with a redirect
    - ±25% jitter on backoff: prevents a burst of retries against a restarting server
    - transport is injectable so tests run without a network
"""

import asyncio
import logging
import random
from dataclasses import dataclass

import httpx
from fastapi import Request, Response
from pydantic import BaseModel

from ewm.core.errors import MainServerUnavailableError
from gateway.config import GatewaySettings

logger = logging.getLogger(__name__)


class ServerClient:
    """Forwards requests of one API area to the main server."""

    def __init__(
        self,
        server_url: str,
        prefix: str = "",
        timeout_seconds: float = 10.0,
        max_retries: int = 2,
        base_delay_ms: int = 200,
        max_delay_ms: int = 2000,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.prefix = prefix
        self.max_retries = max_retries
        self.base_delay_ms = base_delay_ms
        self.max_delay_ms = max_delay_ms
        self.client = httpx.AsyncClient(
            base_url=server_url, timeout=timeout_seconds, transport=transport,
        )

    async def send(
        self,
        method: str,
        path: str = "",
        *,
        params: list[tuple[str, str]] | None = None,
        json: dict | list | None = None,
    ) -> httpx.Response:
        """Send one request to `prefix + path`, retrying connection failures."""
        url = f"{self.prefix}{path}"
        for attempt in range(self.max_retries + 1):
            try:
                response = await self.client.request(
                    method, url, params=params, json=json,
                )
            except httpx.ConnectTimeout as e:
                await self._handle_transient_error(e, attempt, url)
                continue
            except httpx.TimeoutException:
                raise MainServerUnavailableError(f"{method} {url} timed out")
            except httpx.TransportError as e:
                await self._handle_transient_error(e, attempt, url)
                continue
            logger.info(
                f"{method} {url} -> {response.status_code}",
                extra={
                    "path": url,
                    "upstream_status": response.status_code,
                    "attempt": attempt + 1,
                },
            )
            return response
        raise MainServerUnavailableError(f"{method} {url} failed")

    async def forward(
        self, request: Request, body: BaseModel | None = None,
    ) -> Response:
        """Replay an already validated gateway request on the main server."""
        path = request.url.path.removeprefix(self.prefix)
        payload = (
            body.model_dump(mode="json", by_alias=True, exclude_unset=True)
            if body is not None else None
        )
        upstream = await self.send(
            request.method, path,
            params=list(request.query_params.multi_items()),
            json=payload,
        )
        return to_response(upstream)

    async def close(self) -> None:
        await self.client.aclose()

    async def _handle_transient_error(
        self, e: Exception, attempt: int, url: str,
    ) -> None:
        if attempt >= self.max_retries:
            raise MainServerUnavailableError(
                f"{url} unreachable after {self.max_retries} retries: {e}",
            )
        delay = self._backoff(attempt)
        logger.warning(
            f"Main server unreachable, retry after {delay}ms: {e}",
            extra={"path": url, "attempt": attempt + 1},
        )
        await asyncio.sleep(delay / 1000)

    def _backoff(self, attempt: int) -> int:
        """Exponential backoff with ±25% jitter."""
        delay = min(self.max_delay_ms, (2 ** attempt) * self.base_delay_ms)
        return int(delay * random.uniform(0.75, 1.25))  # nosec B311


def to_response(upstream: httpx.Response) -> Response:
    """Pass an upstream response through untouched."""
    return Response(
        content=upstream.content,
        status_code=upstream.status_code,
        media_type=upstream.headers.get("content-type"),
    )


# ─── Client set ─────────────────────────────────────────────────

@dataclass
class Clients:
    users: ServerClient
    categories: ServerClient
    compilations: ServerClient
    admin_events: ServerClient
    private: ServerClient
    subscriptions: ServerClient
    public: ServerClient

    async def close(self) -> None:
        for client in (
            self.users, self.categories, self.compilations, self.admin_events,
            self.private, self.subscriptions, self.public,
        ):
            await client.close()


def build_clients(
    settings: GatewaySettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Clients:
    def make(prefix: str) -> ServerClient:
        return ServerClient(
            settings.main_server_url,
            prefix,
            timeout_seconds=settings.main_server_timeout_seconds,
            max_retries=settings.main_server_max_retries,
            base_delay_ms=settings.main_server_retry_base_delay_ms,
            max_delay_ms=settings.main_server_retry_max_delay_ms,
            transport=transport,
        )

    return Clients(
        users=make("/admin/users"),
        categories=make("/admin/categories"),
        compilations=make("/admin/compilations"),
        admin_events=make("/admin/events"),
        private=make("/users"),
        subscriptions=make("/users"),
        public=make(""),
    )


def get_clients(request: Request) -> Clients:
    """FastAPI dependency for the main server clients."""
    clients = getattr(request.app.state, "clients", None)
    if clients is None:
        raise RuntimeError("Main server clients not initialized")
    return clients
