"""Request and storage logging for the User API.

Invariants:
    - Every record carries timestamp, level, logger name, and message
    - Request fields from RequestLoggingMiddleware (method, path, status_code,
      duration_ms), error_kind from the error handlers, and user_id from
      UserRepository are emitted only when a record sets them
    - setup_logging installs at most one handler, however often it is called

Design Decisions:
    - LOG_FORMAT=json for deployments, LOG_FORMAT=text for local runs and tests
    - The lifespan configures logging before the store is touched, so startup
      failures are logged in the chosen format
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "method", "path", "status_code", "duration_ms", "error_kind", "user_id",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure logging for the application."""
    for existing in list(logging.root.handlers):
        if getattr(existing, "_userapi_handler", False):
            logging.root.removeHandler(existing)
    handler = logging.StreamHandler()
    handler._userapi_handler = True
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
