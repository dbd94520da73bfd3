"""Database Session Manager: async connection pool with automatic rollback.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy and driver exceptions surface as StorageError (core/errors.py)
    - One manager per application instance, held on app.state.db; never a module global

Design Decisions:
    - expire_on_commit=False: returned rows stay readable after commit in async context
    - SQLite URLs skip pool sizing (aiosqlite uses StaticPool for :memory:)
    - A StaticPool engine has one physical connection, so sessions on it are
      serialized by an asyncio.Lock; pooled backends run sessions concurrently
    - Schema is created with metadata.create_all; no migration framework
"""

import asyncio
import logging
from contextlib import asynccontextmanager, nullcontext
from typing import AsyncGenerator, Sequence

from fastapi import Request
from sqlalchemy import func, insert, select
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from userapi.core.errors import StartupError, StorageError
from userapi.db.base import Base
from userapi.models import User

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages the async engine (the pool) and hands out sessions."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        try:
            engine_kwargs: dict = {"pool_pre_ping": True}
            if make_url(database_url).get_backend_name() != "sqlite":
                engine_kwargs.update(
                    pool_size=pool_size,
                    max_overflow=max_overflow,
                    pool_recycle=3600,
                )
            self.engine = create_async_engine(database_url, **engine_kwargs)
        except (SQLAlchemyError, ImportError) as e:
            raise StartupError(f"Invalid database configuration: {e}") from e
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        # StaticPool hands every session the same connection
        self.single_connection = isinstance(
            self.engine.sync_engine.pool, StaticPool,
        )
        self._connection_lock = asyncio.Lock() if self.single_connection else None

    def _connection_guard(self):
        """Lock held for a whole session when the pool has one connection."""
        return self._connection_lock or nullcontext()

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        async with self._connection_guard():
            session = self._session_factory()
            try:
                yield session
            except (SQLAlchemyError, OSError) as e:
                await session.rollback()
                logger.error(f"DB error: {e}")
                raise StorageError.wrap(e) from e
            finally:
                await session.close()

    async def create_schema(self) -> None:
        """Create the users table if it does not exist yet."""
        try:
            async with self._connection_guard():
                async with self.engine.begin() as conn:
                    await conn.run_sync(Base.metadata.create_all)
        except (SQLAlchemyError, OSError) as e:
            raise StorageError.wrap(e) from e

    async def seed(self, names: Sequence[str]) -> int:
        """Insert `names` in order when the users table is empty. Returns rows added."""
        async with self.session() as db:
            existing = await db.scalar(select(func.count()).select_from(User))
            if existing or not names:
                return 0
            await db.execute(insert(User), [{"name": name} for name in names])
            await db.commit()
        logger.info(f"Seeded {len(names)} users")
        return len(names)

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: a session borrowed from this app's pool."""
    db_manager: DatabaseSessionManager = request.app.state.db
    async with db_manager.session() as session:
        yield session
