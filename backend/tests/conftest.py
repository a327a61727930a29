"""Root conftest — shared test configuration and the in-memory database.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use a session from the test engine
    - db_manager patched so readiness checks hit the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - The override goes through DatabaseSessionManager.session(), so integrity
      errors surface as 409 exactly as in production
    - Fixtures live here (not in tests/services) because gateway end-to-end
      tests drive the real backend app too
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient  # noqa: E402

from ewm.db.base import Base  # noqa: E402
from ewm.infrastructure.database import get_db, DatabaseSessionManager  # noqa: E402
import ewm.infrastructure.database as db_module  # noqa: E402
import ewm.models  # noqa: E402,F401
from ewm.main import app  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def test_manager(test_engine, test_session_factory):
    """DatabaseSessionManager bound to the test engine."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
async def backend_app(test_manager):
    """Backend app wired to the test database."""
    async def override_get_db():
        async with test_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    original_manager = db_module.db_manager
    db_module.db_manager = test_manager

    yield app

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def client(backend_app):
    """FastAPI test client for the backend service."""
    async with AsyncClient(
        transport=ASGITransport(app=backend_app), base_url="http://test",
    ) as c:
        yield c
