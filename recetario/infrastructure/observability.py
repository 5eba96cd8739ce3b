"""Structured Logging — JSON formatter and setup for the validation pipeline's log records.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (field, error_code, recipe_id, user_id) surfaced when present
    - JSON format in production, human-readable in development
    - setup_logging is idempotent: calling it twice does not duplicate handlers

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - Level and format default to Settings so the shell can call setup_logging() bare
"""

import logging
import json
from datetime import datetime, timezone

from recetario.config import get_settings

_EXTRA_KEYS = ("field", "error_code", "recipe_id", "user_id")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class _RecetarioHandler(logging.StreamHandler):
    """Marker subclass so repeated setup_logging calls can find their own handler."""


def setup_logging(level: str | None = None, fmt: str | None = None) -> logging.Handler:
    """Configure root logging for the application. Returns the installed handler."""
    settings = get_settings()
    level = level or settings.log_level
    fmt = fmt or settings.log_format

    for existing in list(logging.root.handlers):
        if isinstance(existing, _RecetarioHandler):
            logging.root.removeHandler(existing)

    handler = _RecetarioHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
