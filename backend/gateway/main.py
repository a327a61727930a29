"""Explore With Me Gateway — FastAPI application entry point.

Invariants:
    - Main server clients are built on startup and closed on shutdown
    - Same error envelope as the main server (shared error handlers)
    - No database access: the gateway only validates and forwards

Design Decisions:
    - Clients live on app.state and are injected with get_clients, so tests
      can install clients backed by a mock or in-process transport
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ewm.api.error_handlers import register_error_handlers
from ewm.infrastructure.observability import setup_logging
from gateway.clients import build_clients
from gateway.config import get_settings
from gateway.routes import admin, health, private, public, subscriptions

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.clients = build_clients(settings)
    logger.info(f"EWM gateway started, main server at {settings.main_server_url}")
    yield
    await app.state.clients.close()
    logger.info("EWM gateway shutting down")


app = FastAPI(
    title="Explore With Me Gateway", version="1.0.0", lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(admin.router)
app.include_router(private.router)
app.include_router(subscriptions.router)
app.include_router(public.router)

register_error_handlers(app)
