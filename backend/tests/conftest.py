"""Root conftest: shared test configuration and an isolated pool per test.

Invariants:
    - Every test that asks for db_manager gets a fresh in-memory SQLite database
    - The users table exists but is empty; seeding is explicit per test
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402

from userapi.config import Settings  # noqa: E402
from userapi.infrastructure.database import DatabaseSessionManager  # noqa: E402

from tests.support import MEMORY_URL  # noqa: E402


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        database_url=MEMORY_URL, seed_users=[], log_format="text",
    )


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager(MEMORY_URL)
    await manager.create_schema()
    yield manager
    await manager.dispose()


@pytest.fixture
async def test_db(db_manager):
    async with db_manager.session() as session:
        yield session
