from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any

from app.core.config import settings

_STANDARD_ATTRS = set(logging.makeLogRecord({}).__dict__.keys())

# never written to the log stream, wherever they show up in ``extra``
_SECRET_KEYS = {"consumer_key", "consumer_secret", "authorization", "wc_consumer_key", "wc_consumer_secret"}
_MAX_FIELD_CHARS = 2000


def _scrub(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            key: "***" if str(key).lower() in _SECRET_KEYS else _scrub(item)
            for key, item in value.items()
        }
    if isinstance(value, str) and len(value) > _MAX_FIELD_CHARS:
        # WooCommerce error pages can be whole HTML documents
        return f"{value[:_MAX_FIELD_CHARS]}... [{len(value)} chars]"
    return value


class JsonFormatter(logging.Formatter):
    """One JSON object per line; ``extra`` fields go under ``context``."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "service": settings.PROJECT_NAME,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = {key: value for key, value in record.__dict__.items() if key not in _STANDARD_ATTRS}
        if context:
            entry["context"] = _scrub(context)
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            entry["stack_info"] = record.stack_info
        return json.dumps(entry, default=str, ensure_ascii=False)


def setup_logging(level_name: str | None = None) -> None:
    """Route every logger, uvicorn's included, through the JSON handler."""
    level = logging.getLevelName((level_name or settings.LOG_LEVEL).upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"json": {"()": JsonFormatter}},
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stdout",
                    "formatter": "json",
                }
            },
            "root": {"handlers": ["stdout"], "level": level},
            "loggers": {
                "uvicorn.error": {"level": level},
                "uvicorn.access": {"handlers": ["stdout"], "level": level, "propagate": False},
                # httpx logs every request at INFO; the WooCommerce client already does
                "httpx": {"level": max(level, logging.WARNING)},
                "httpcore": {"level": max(level, logging.WARNING)},
            },
        }
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
