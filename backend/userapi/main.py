"""User API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map UserApiError -> {"error": message} JSON responses
    - The connection pool is created per app and held on app.state.db
    - Schema creation and seeding happen in the lifespan; any failure there
      is a StartupError and the process does not serve traffic

Design Decisions:
    - create_app() factory: tests build an app around an isolated pool
    - Lifespan over @app.on_event
    - Trailing-slash redirects disabled; /users/ is an unmatched route
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from userapi.api.error_handlers import register_error_handlers
from userapi.api.middleware import RequestLoggingMiddleware, TimeoutMiddleware
from userapi.api.routes import health, users
from userapi.config import Settings, get_settings
from userapi.core.errors import StartupError, StorageError
from userapi.infrastructure.database import DatabaseSessionManager
from userapi.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

DESCRIPTION = """
# User API

A lightweight REST API for managing users, built with:

- [FastAPI](https://fastapi.tiangolo.com) for the async web framework
- [SQLAlchemy](https://www.sqlalchemy.org) (asyncio) for pooled database access
- [Pydantic](https://docs.pydantic.dev) for request and response schemas

### Endpoints

- `GET /users`: list every user in insertion order
- `GET /users/{id}`: fetch one user, 404 when absent
- `POST /users`: create a user from `{"name": ...}`, 400 when the name is blank
- `GET /health`: liveness probe, never touches the database
"""


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    db: DatabaseSessionManager = app.state.db
    setup_logging(settings.log_level, settings.log_format)
    try:
        await db.create_schema()
        await db.seed(settings.seed_users)
    except StorageError as e:
        logger.critical(
            f"Cannot initialize the store: {e.message}",
            extra={"error_kind": "startup"},
        )
        raise StartupError(f"Cannot initialize the store: {e.message}") from e
    logger.info(
        f"User API started, docs available at "
        f"http://{settings.host}:{settings.port}/docs",
    )
    yield
    logger.info("User API shutting down")
    await db.dispose()


def create_app(
    settings: Settings | None = None,
    db: DatabaseSessionManager | None = None,
) -> FastAPI:
    """Build the application around one connection pool."""
    settings = settings or get_settings()
    if db is None:
        db = DatabaseSessionManager(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )

    app = FastAPI(
        title="User API",
        version="0.1.0",
        description=DESCRIPTION,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url=None,
        openapi_url="/api-doc/openapi.json",
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.db = db

    # Last added runs first: CORS -> logging -> timeout -> routes
    app.add_middleware(
        TimeoutMiddleware, timeout_seconds=settings.request_timeout_seconds,
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(users.router)
    app.include_router(health.router)

    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Serve `app` with uvicorn; Ctrl+C drains in-flight requests before exit."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        lifespan="on",
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
