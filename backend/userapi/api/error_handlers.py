"""Error Handlers: the single translation from internal outcome to HTTP response.

Invariants:
    - UserApiError -> its own http_status with {"error": message}
    - RequestValidationError (malformed or mistyped body) -> Validation kind, 400
    - No route for method+path (404/405) -> 404 {"error": "Route not found"}
    - Exception (catch-all) -> 500, never leaks internal details
    - Route handlers never build error responses themselves

Design Decisions:
    - Four-layer handler: domain (UserApiError), request shape (Pydantic),
      routing (Starlette HTTPException), catch-all (Exception)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from userapi.core.errors import ErrorKind, UserApiError, UserValidationError

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND_BODY = {"error": "Route not found"}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_user_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_route_error_handler(app)
    _register_generic_error_handler(app)


def _register_user_api_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(UserApiError)
    async def user_api_error_handler(request: Request, exc: UserApiError):
        """Handle all user service errors by kind."""
        extra = {"error_kind": exc.kind.value, "path": request.url.path}
        if exc.kind is ErrorKind.STORAGE:
            logger.error(f"Storage error: {exc.message}", extra=extra)
        else:
            logger.info(f"{exc.kind.value}: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status or status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Classify request-shape failures as Validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_kind": ErrorKind.VALIDATION.value},
        )
        error = _build_validation_error(exc)
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )


def _register_route_error_handler(app: FastAPI) -> None:
    """Register fallback for unmatched routes."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Unmatched method+path collapses to one fixed 404 body."""
        if exc.status_code in (
            status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
        ):
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content=ROUTE_NOT_FOUND_BODY,
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "An unexpected error occurred"},
        )


def _build_validation_error(exc: RequestValidationError) -> UserValidationError:
    """Summarize the first Pydantic error as `<field>: <message>`."""
    errors = exc.errors()
    if not errors:
        return UserValidationError("Invalid request data")
    first = errors[0]
    if first.get("type") == "json_invalid":
        return UserValidationError("Invalid JSON body")
    location = [str(part) for part in first.get("loc", ()) if part != "body"]
    field = ".".join(location)
    message = first.get("msg", "Invalid request data")
    if field:
        return UserValidationError(f"{field}: {message}", field=field)
    return UserValidationError(message)
