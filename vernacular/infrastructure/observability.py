"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (entity_type, entity_key, error_code, ...) surfaced when present
    - JSON format in production, human-readable in development
    - setup_logging() installs at most one handler on the root logger

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - Level and format default to Settings so hosts can configure via env vars
"""

import logging
import json
from datetime import datetime, timezone

from vernacular.config import get_settings

EXTRA_FIELDS = (
    "error_code", "entity_type", "entity_key", "violation_count",
    "page_index", "page_size",
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
        return json.dumps(log, ensure_ascii=False, default=str)


class _VernacularHandler(logging.StreamHandler):
    """Marker type so repeated setup_logging() calls replace, not stack."""


def setup_logging(level: str | None = None, fmt: str | None = None) -> logging.Handler:
    """Configure root logging. Missing arguments fall back to Settings."""
    settings = get_settings()
    level = level or settings.log_level
    fmt = fmt or settings.log_format

    for existing in list(logging.root.handlers):
        if isinstance(existing, _VernacularHandler):
            logging.root.removeHandler(existing)

    handler = _VernacularHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s — %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
