"""
Logging setup: one stdout handler, JSON lines outside debug mode.

Moderation log calls pass their context through ``extra`` (user_id,
content_type, risk_level, phrases); the JSON formatter lifts those keys to
the top level of each entry. Screened text itself is never logged.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Optional

from safety_api.core.config import get_settings
from safety_api.core.middleware import get_correlation_id

EXTRA_FIELDS = (
    "user_id",
    "content_type",
    "risk_level",
    "phrases",
    "path",
    "method",
    "status_code",
)

DEBUG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s [%(correlation_id)s]: %(message)s"

# Chatty under the Supabase client, the Celery publisher and uvicorn
NOISY_LOGGERS = (
    "uvicorn.access",
    "httpx",
    "httpcore",
    "hpack",
    "kombu",
    "celery.redirected",
)


class CorrelationIDFilter(logging.Filter):
    """Stamp each record with the current request's correlation ID ("-" outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "-"
        return True


class JSONFormatter(logging.Formatter):
    """One JSON object per record, moderation context keys at the top level."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        correlation_id = getattr(record, "correlation_id", "-")
        if correlation_id != "-":
            entry["correlation_id"] = correlation_id
        for key in EXTRA_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                entry[key] = value
        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def _formatter(debug: bool) -> logging.Formatter:
    if debug:
        return logging.Formatter(DEBUG_FORMAT, datefmt="%H:%M:%S")
    return JSONFormatter()


def setup_logging(level: Optional[str] = None) -> None:
    """Route all logging to stdout. Called once from the app lifespan."""
    debug = get_settings().debug
    log_level = level or ("DEBUG" if debug else "INFO")

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(CorrelationIDFilter())
    handler.setFormatter(_formatter(debug))

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(log_level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
