"""Explore With Me — FastAPI application entry point for the backend service.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ExploreError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Paths carry no version prefix; the gateway forwards them unchanged
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ewm.api.error_handlers import register_error_handlers
from ewm.api.routes import (
    admin_categories, admin_compilations, admin_events, admin_users,
    health, private_events, private_requests, public, subscriptions,
)
from ewm.config import get_settings
from ewm.infrastructure import database
from ewm.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("EWM service started")
    yield
    if database.db_manager is not None:
        await database.db_manager.dispose()
    logger.info("EWM service shutting down")


app = FastAPI(
    title="Explore With Me", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(admin_users.router)
app.include_router(admin_categories.router)
app.include_router(admin_events.router)
app.include_router(admin_compilations.router)
app.include_router(private_events.router)
app.include_router(private_requests.router)
app.include_router(subscriptions.router)
app.include_router(public.router)

register_error_handlers(app)
