"""HTTP Middleware: request logging and request timeout.

Invariants:
    - One INFO record per request with method, path, status_code, duration_ms
    - A request running past the timeout is answered with 408 {"error": "Request timed out"}

Design Decisions:
    - BaseHTTPMiddleware dispatch with call_next, registered in create_app()
"""

import asyncio
import logging
import time

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request once it has a response."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code}",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round((time.perf_counter() - started) * 1000, 2),
            },
        )
        return response


class TimeoutMiddleware(BaseHTTPMiddleware):
    """Abort requests that run longer than `timeout_seconds`."""

    def __init__(self, app, timeout_seconds: float = 10.0):
        super().__init__(app)
        self.timeout_seconds = timeout_seconds

    async def dispatch(self, request: Request, call_next):
        try:
            return await asyncio.wait_for(
                call_next(request), timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.warning(
                f"Request timed out after {self.timeout_seconds}s",
                extra={"method": request.method, "path": request.url.path},
            )
            return JSONResponse(
                status_code=status.HTTP_408_REQUEST_TIMEOUT,
                content={"error": "Request timed out"},
            )
