"""Health Probe: liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 `ok` (plain text) if the process is up
    - Never touches the store, so it stays green while the database is down
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Health Check"])


@router.get(
    "/health",
    response_class=PlainTextResponse,
    description="Health check endpoint, useful for monitoring and uptime tools",
)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return "ok"
