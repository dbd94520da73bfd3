"""Storage Failures: any store error becomes 500 with the driver message.

Invariants:
    - Storage errors are never masked as 404/400 or partial success
    - Body is {"error": <driver message>}
"""

import pytest
from httpx import ASGITransport, AsyncClient

from userapi.infrastructure.database import DatabaseSessionManager
from userapi.main import create_app

from tests.support import MEMORY_URL


@pytest.fixture
async def schemaless_client(test_settings):
    """Client over a reachable store that has no users table."""
    db = DatabaseSessionManager(MEMORY_URL)
    app = create_app(test_settings, db=db)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    await db.dispose()


async def test_list_users_storage_failure_returns_500(schemaless_client):
    res = await schemaless_client.get("/users")
    assert res.status_code == 500
    assert res.json() == {"error": "no such table: users"}


async def test_get_user_storage_failure_returns_500(schemaless_client):
    res = await schemaless_client.get("/users/1")
    assert res.status_code == 500
    assert res.json() == {"error": "no such table: users"}


async def test_create_user_storage_failure_returns_500(schemaless_client):
    res = await schemaless_client.post("/users", json={"name": "Alice"})
    assert res.status_code == 500
    assert res.json() == {"error": "no such table: users"}


async def test_validation_runs_before_storage(schemaless_client):
    res = await schemaless_client.post("/users", json={"name": "  "})
    assert res.status_code == 400
    assert res.json() == {"error": "Name must not be empty"}
