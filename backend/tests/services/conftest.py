"""Service test fixtures — commonly needed seed data.

Invariants:
    - Database, app override and client come from the root conftest
    - Seed fixtures go through the HTTP API (tests/factories.py)
"""

import pytest

from tests.factories import create_category, create_published_event, create_user


@pytest.fixture
async def initiator(client):
    return await create_user(client, "Initiator")


@pytest.fixture
async def category(client):
    return await create_category(client)


@pytest.fixture
async def published_event(client, initiator, category):
    return await create_published_event(client, initiator["id"], category["id"])
