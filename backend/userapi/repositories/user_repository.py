"""User Repository: the only data-access primitives the request handlers use.

Invariants:
    - list_users returns rows in insertion order (primary key ascending); empty is valid
    - get_user returns None for an absent id; absence is not an error here
    - insert_user returns the generated id and stored name from one
      INSERT ... RETURNING statement; callers never re-read
    - Any SQLAlchemy or driver failure is rolled back and re-raised as StorageError;
      the exception type is never inspected
    - No retries
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy import insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from userapi.core.domain_types import UserId, ValidatedName
from userapi.core.errors import StorageError
from userapi.infrastructure.database import get_db
from userapi.models.user import User

logger = logging.getLogger(__name__)


class UserRepository:
    """SQLAlchemy implementation of core.repository_protocols.UserGateway."""

    def __init__(self, session: AsyncSession):
        self._session = session

    @asynccontextmanager
    async def _storage_call(self, operation: str) -> AsyncGenerator[None, None]:
        try:
            yield
        except (SQLAlchemyError, OSError) as e:
            logger.error(
                f"Storage failure during {operation}: {e}",
                extra={"error_kind": "storage"},
            )
            try:
                await self._session.rollback()
            except (SQLAlchemyError, OSError) as rollback_error:
                logger.warning(f"Rollback after {operation} failed: {rollback_error}")
            raise StorageError.wrap(e) from e

    async def list_users(self) -> list[User]:
        async with self._storage_call("list_users"):
            result = await self._session.execute(select(User).order_by(User.id))
            return list(result.scalars().all())

    async def get_user(self, user_id: UserId) -> User | None:
        async with self._storage_call("get_user"):
            result = await self._session.execute(
                select(User).where(User.id == user_id),
            )
            return result.scalar_one_or_none()

    async def insert_user(self, name: ValidatedName) -> User:
        async with self._storage_call("insert_user"):
            result = await self._session.scalars(
                insert(User).returning(User), [{"name": name}],
            )
            user = result.one()
            await self._session.commit()
        logger.info("Created user", extra={"user_id": user.id})
        return user


async def get_user_repository(
    db: AsyncSession = Depends(get_db),
) -> UserRepository:
    """FastAPI dependency: a repository bound to the request's session."""
    return UserRepository(db)
