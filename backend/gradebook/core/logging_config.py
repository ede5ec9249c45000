"""
Logging setup for the analysis service.

Development gets a single-line human format. Production emits one JSON
object per record so the hosting platform can index request ids, routes
and timings without parsing free text.
"""
import json
import logging
import logging.config
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from gradebook.core.config import settings

# Request id of the request being handled; set and reset by
# RequestLoggingMiddleware.
request_id_context: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

HUMAN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
HUMAN_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JSONFormatter(logging.Formatter):
    """Render a log record as a JSON object."""

    # Attributes passed through `extra=` by the middleware and error handlers
    EXTRA_FIELDS = (
        "method",
        "path",
        "status_code",
        "duration_ms",
        "client_host",
        "error_id",
    )

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        request_id = request_id_context.get()
        if request_id:
            entry["request_id"] = request_id

        entry.update(
            {
                name: getattr(record, name)
                for name in self.EXTRA_FIELDS
                if hasattr(record, name)
            }
        )

        if record.levelno >= logging.ERROR:
            entry["source"] = f"{record.pathname}:{record.lineno}"
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def _resolve_level(name: Optional[str]) -> int:
    """Map a level name such as "debug" to its number; unknown names give INFO."""
    level = getattr(logging, str(name or "INFO").upper(), None)
    return level if isinstance(level, int) else logging.INFO


def setup_logging() -> None:
    """
    Apply the logging configuration for the current environment.

    The "gradebook" logger tree and the root logger share one stdout
    handler. uvicorn's per-request access lines are silenced while DEBUG is
    on, since RequestLoggingMiddleware already records every request.
    """
    level = _resolve_level(getattr(settings, "LOG_LEVEL", "INFO"))
    formatter = "json" if settings.ENV == "production" else "default"
    access_level = logging.WARNING if settings.DEBUG else logging.INFO

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {"format": HUMAN_FORMAT, "datefmt": HUMAN_DATE_FORMAT},
                "json": {"()": JSONFormatter},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": level,
                    "formatter": formatter,
                    "stream": sys.stdout,
                },
            },
            "root": {"level": level, "handlers": ["console"]},
            "loggers": {
                "gradebook": {
                    "level": level,
                    "handlers": ["console"],
                    "propagate": False,
                },
                "uvicorn.access": {
                    "level": access_level,
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
        }
    )


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module; pass __name__."""
    return logging.getLogger(name)
