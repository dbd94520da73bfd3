"""Boundary Protocols: contracts between the request handlers and the store.

Invariants:
    - Core NEVER imports from infrastructure; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by infrastructure via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
    - Every UserGateway method may raise StorageError and nothing else
"""

from typing import Protocol, Sequence

from userapi.core.domain_types import UserId, ValidatedName


class UserLike(Protocol):
    """Structural contract for persisted users handed back by the gateway."""
    id: int
    name: str


class NewUserLike(Protocol):
    """Structural contract for creation input (the NewUser DTO)."""
    name: str


class UserGateway(Protocol):
    """Contract for user persistence, implemented by infrastructure."""
    async def list_users(self) -> Sequence[UserLike]: ...
    async def get_user(self, user_id: UserId) -> UserLike | None: ...
    async def insert_user(self, name: ValidatedName) -> UserLike: ...
