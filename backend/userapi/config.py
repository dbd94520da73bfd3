"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache), single instance per process
    - The request pipeline never reads settings; create_app() consumes them

Design Decisions:
    - Defaults reproduce the reference deployment: in-memory SQLite,
      127.0.0.1:3000, any CORS origin, 10s request timeout, Alice/Bob seed
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///:memory:"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Names inserted at startup when the users table is empty
    seed_users: list[str] = ["Alice", "Bob"]

    # Listener
    host: str = "127.0.0.1"
    port: int = 3000

    # API
    cors_origins: list[str] = ["*"]
    request_timeout_seconds: float = 10.0

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
