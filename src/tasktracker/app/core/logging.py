"""Centralised logging configuration for the task tracking service."""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any

from .config import Settings
from .context import NO_REQUEST_ID, get_request_id

_RESERVED_LOG_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime", "request_id"}

# Record identifiers the services attach as extras, emitted in this order.
ENTITY_FIELDS: tuple[str, ...] = (
    "task_id",
    "user_id",
    "category_id",
    "priority_id",
    "missing_kind",
    "missing_id",
)


class JsonLogFormatter(logging.Formatter):
    """Render log records as single-line JSON objects.

    Keys appear as: service defaults, the record header (timestamp, level,
    logger, request id, message), the entity identifiers in ``ENTITY_FIELDS``
    order, then any remaining extras sorted by name.
    """

    def __init__(self, *, defaults: dict[str, Any] | None = None) -> None:
        super().__init__()
        self._defaults = defaults or {}

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, Any] = dict(self._defaults)
        payload["timestamp"] = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        payload["level"] = record.levelname
        payload["logger"] = record.name
        payload["request_id"] = getattr(record, "request_id", NO_REQUEST_ID)
        payload["message"] = record.getMessage()

        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_LOG_RECORD_ATTRS and key not in payload
        }
        for key in ENTITY_FIELDS:
            if key in extras:
                payload[key] = self._coerce_extra(extras.pop(key))
        for key in sorted(extras):
            payload[key] = self._coerce_extra(extras[key])

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack"] = self.formatStack(record.stack_info)

        return json.dumps(payload, ensure_ascii=False, default=str)

    @staticmethod
    def _coerce_extra(value: Any) -> Any:
        try:
            json.dumps(value)
        except TypeError:
            return str(value)
        return value


class RequestContextFilter(logging.Filter):
    """Attach request correlation identifiers to emitted log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.request_id = get_request_id()
        return True


def _routed_loggers(settings: Settings, level: int) -> dict[str, dict[str, Any]]:
    """Loggers that write straight to the JSON handler instead of propagating."""

    levels = {
        "uvicorn": level,
        "uvicorn.error": level,
        "uvicorn.access": level,
        "sqlalchemy.engine": logging.INFO if settings.db_echo else logging.WARNING,
    }
    return {
        name: {"handlers": ["default"], "level": logger_level, "propagate": False}
        for name, logger_level in levels.items()
    }


def configure_logging(settings: Settings) -> None:
    """Apply the JSON logging configuration derived from ``settings``."""

    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.captureWarnings(True)

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "()": JsonLogFormatter,
                    "defaults": {
                        "service": settings.project_name,
                        "environment": settings.environment,
                    },
                }
            },
            "filters": {"request_context": {"()": RequestContextFilter}},
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stdout",
                    "formatter": "json",
                    "level": level,
                    "filters": ["request_context"],
                }
            },
            "root": {"handlers": ["default"], "level": level},
            "loggers": _routed_loggers(settings, level),
        }
    )


__all__ = ["ENTITY_FIELDS", "JsonLogFormatter", "RequestContextFilter", "configure_logging"]
