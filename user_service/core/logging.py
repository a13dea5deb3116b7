"""Central logging configuration for the user service.

Logs go to stdout so they are picked up by the container runtime, and the
Uvicorn loggers are routed through the same handler. Configuration is read
from environment variables so it can run before typed Settings exist.
"""

from __future__ import annotations

import json
import logging
import logging.config
import os
import sys
from datetime import UTC, datetime
from typing import Any

# Attributes that handlers and middleware attach via ``extra=``.
_EXTRA_FIELDS = (
    "method",
    "path",
    "query",
    "status_code",
    "duration_ms",
    "client_ip",
    "user_agent",
    "error_type",
    "user_id",
)


def env_bool(name: str, *, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "t", "yes", "y", "on"}


class JsonFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        extras = record.__dict__
        for key in _EXTRA_FIELDS:
            if key in extras:
                payload[key] = extras[key]

        return json.dumps(payload, ensure_ascii=False, default=str)


def build_logging_config() -> dict[str, Any]:
    """Build the dictConfig for the current environment.

    Env vars:
    - LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: INFO)
    - LOG_JSON: true/false (default: false)
    - LOG_REQUESTS: true/false (default: true)
    - LOG_UVICORN_ACCESS: true/false
        - if unset: defaults to false when LOG_REQUESTS=true (avoid duplicate logs),
          otherwise true.
    - SQL_LOG_LEVEL: level for SQLAlchemy engine logs (default: WARNING)
    """
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    log_json = env_bool("LOG_JSON", default=False)
    log_requests = env_bool("LOG_REQUESTS", default=True)
    uvicorn_access = env_bool("LOG_UVICORN_ACCESS", default=not log_requests)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "text": {
                "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            },
            "json": {
                "()": "user_service.core.logging.JsonFormatter",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "json" if log_json else "text",
                "stream": sys.stdout,
            }
        },
        "root": {"handlers": ["console"], "level": level},
        "loggers": {
            "uvicorn": {"level": level, "propagate": True},
            "uvicorn.error": {"level": level, "propagate": True},
            "uvicorn.access": {
                "level": "INFO" if uvicorn_access else "WARNING",
                "propagate": True,
            },
            "sqlalchemy.engine": {
                "level": os.getenv("SQL_LOG_LEVEL", "WARNING"),
                "propagate": True,
            },
        },
    }


def configure_logging() -> None:
    """Configure stdlib logging for the service and uvicorn."""
    logging.config.dictConfig(build_logging_config())
