"""Logging configuration for lease-schedule.

Two output formats are supported: a pipe-separated line for terminals and
one JSON object per line for log collectors. Lease context passed through
``extra`` (tenant, property, payment counts) becomes top-level JSON keys.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

# Attributes callers attach with ``logger.info(..., extra={...})``
CONTEXT_FIELDS = ("tenant_id", "property_id", "payment_id", "entity_type", "payments", "skipped")

# Libraries whose debug output drowns the schedule logs
QUIET_LOGGERS = ("psycopg", "faker")

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level: str = "INFO", format_type: str = "standard") -> None:
    """Configure root logging for scripts and scenarios.

    Parameters
    ----------
    level : str
        Log level name. Unknown names fall back to INFO.
    format_type : str
        ``"json"`` for :class:`JsonFormatter`, anything else for the
        standard line format.
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(fmt=STANDARD_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level)

    logging.getLogger("lease_schedule").setLevel(log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in CONTEXT_FIELDS:
            if hasattr(record, name):
                payload[name] = getattr(record, name)

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module or script."""
    return logging.getLogger(name)
