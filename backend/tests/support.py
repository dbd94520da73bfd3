"""Shared test constants."""

MEMORY_URL = "sqlite+aiosqlite:///:memory:"
UNREACHABLE_URL = "sqlite+aiosqlite:////nonexistent-userapi-dir/users.db"
