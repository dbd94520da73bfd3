"""Error Hierarchy: the fixed taxonomy of failure kinds for the user service.

Invariants:
    - Every error has a kind (ErrorKind) and, except Startup, exactly one HTTP status
    - to_response() always produces {"error": <message>}
    - StorageError is built by wrapping the lower-layer exception, never by
      inspecting its type; the driver message is carried verbatim

Design Decisions:
    - Single hierarchy with UserApiError base: the global handler in
      api/error_handlers.py catches all of it and is the only place that
      turns a kind into a status code
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure kinds. Each one maps to a single outcome on the wire."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    STORAGE = "storage"
    STARTUP = "startup"


class UserApiError(Exception):
    """Base exception for all user service errors."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        http_status: int | None = 500,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"error": self.message}


# ─── Client outcomes (400-level) ─────────────────────────────────

class UserValidationError(UserApiError):
    """Request payload failed a field rule."""
    def __init__(self, message: str, field: str | None = None):
        super().__init__(message, ErrorKind.VALIDATION, 400)
        self.field = field


class UserNotFoundError(UserApiError):
    """Requested user id has no matching row."""
    def __init__(self, user_id: int | None = None):
        super().__init__("Not found", ErrorKind.NOT_FOUND, 404)
        self.user_id = user_id


# ─── Infrastructure failures ─────────────────────────────────────

class StorageError(UserApiError):
    """Backing store failed. Opaque: constraint, timeout and connectivity look alike."""
    def __init__(self, message: str):
        super().__init__(message, ErrorKind.STORAGE, 500)

    @classmethod
    def wrap(cls, exc: BaseException) -> "StorageError":
        """Wrap a driver/ORM exception, keeping the driver's own message."""
        orig = getattr(exc, "orig", None)
        return cls(str(orig if orig is not None else exc))


class StartupError(UserApiError):
    """Listener or store unavailable at boot. Fatal, never rendered as a response."""
    def __init__(self, message: str):
        super().__init__(message, ErrorKind.STARTUP, None)
