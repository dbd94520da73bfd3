"""API test fixtures: FastAPI app around the per-test pool + httpx client.

Invariants:
    - The app under test never touches the module-level userapi.main.app pool
    - Lifespan is not run by ASGITransport; schema comes from db_manager
"""

import pytest
from httpx import ASGITransport, AsyncClient

from userapi.main import create_app


@pytest.fixture
def test_app(test_settings, db_manager):
    return create_app(test_settings, db=db_manager)


@pytest.fixture
async def client(test_app):
    async with AsyncClient(
        transport=ASGITransport(app=test_app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def seed_users(db_manager):
    """Seed Alice then Bob, ids 1 and 2."""
    await db_manager.seed(["Alice", "Bob"])
