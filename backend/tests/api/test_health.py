"""Health Probe: liveness is independent of the store.

Invariants:
    - GET /health returns 200 text `ok` before any user exists
    - GET /health returns 200 even when the store cannot be reached
"""

from httpx import ASGITransport, AsyncClient

from userapi.infrastructure.database import DatabaseSessionManager
from userapi.main import create_app

from tests.support import UNREACHABLE_URL


async def test_health_returns_ok_plain_text(client):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.text == "ok"
    assert res.headers["content-type"].startswith("text/plain")


async def test_health_ok_when_store_unreachable(test_settings):
    db = DatabaseSessionManager(UNREACHABLE_URL)
    app = create_app(test_settings, db=db)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        health = await c.get("/health")
        users = await c.get("/users")
    await db.dispose()

    assert health.status_code == 200
    assert health.text == "ok"
    assert users.status_code == 500
