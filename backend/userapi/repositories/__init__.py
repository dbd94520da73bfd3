"""Repository layer: the Storage Gateway between request handlers and the store.

Usage:
    from userapi.repositories import UserRepository
"""

from .user_repository import UserRepository, get_user_repository

__all__ = ["UserRepository", "get_user_repository"]
