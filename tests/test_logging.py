from __future__ import annotations

import io
import json
import logging

from tasktracker.app.core.config import Settings
from tasktracker.app.core.context import bind_request_id, reset_request_id
from tasktracker.app.core.logging import JsonLogFormatter, configure_logging


def test_configure_logging_outputs_json_with_request_id() -> None:
    settings = Settings(environment="test")
    settings.log_level = "INFO"
    configure_logging(settings)

    root_logger = logging.getLogger()
    handler = next(
        (h for h in root_logger.handlers if isinstance(h, logging.StreamHandler)),
        None,
    )
    assert handler is not None, "Expected JSON stream handler to be configured"

    buffer = io.StringIO()
    previous_stream = handler.setStream(buffer)

    token = bind_request_id("req-json-1")
    try:
        logger = logging.getLogger("tasktracker.tests.logging")
        logger.info("Task created", extra={"task_id": 7, "user_id": 3})
    finally:
        handler.flush()
        reset_request_id(token)
        handler.setStream(previous_stream)

    log_lines = buffer.getvalue().strip().splitlines()
    assert log_lines, "Expected structured log line to be captured"
    payload = json.loads(log_lines[-1])

    assert payload["message"] == "Task created"
    assert payload["request_id"] == "req-json-1"
    assert payload["environment"] == settings.environment
    assert payload["level"] == "INFO"
    assert payload["task_id"] == 7
    assert payload["user_id"] == 3
    assert payload["service"] == settings.project_name


def test_formatter_stringifies_unserialisable_extras() -> None:
    formatter = JsonLogFormatter(defaults={"service": "Task Tracker"})
    record = logging.LogRecord("tasktracker", logging.WARNING, __file__, 1, "odd extra", None, None)
    record.payload = object()

    payload = json.loads(formatter.format(record))

    assert payload["service"] == "Task Tracker"
    assert payload["level"] == "WARNING"
    assert payload["request_id"] == "-"
    assert payload["payload"].startswith("<object object")


def test_formatter_orders_entity_identifiers_before_other_extras() -> None:
    formatter = JsonLogFormatter(defaults={"service": "Task Tracker", "environment": "test"})
    record = logging.LogRecord("tasktracker", logging.INFO, __file__, 1, "Task not created", None, None)
    record.zeta = "last"
    record.missing_id = 9
    record.missing_kind = "Category"
    record.alpha = "first"
    record.user_id = 4

    payload = json.loads(formatter.format(record))

    assert list(payload) == [
        "service",
        "environment",
        "timestamp",
        "level",
        "logger",
        "request_id",
        "message",
        "user_id",
        "missing_kind",
        "missing_id",
        "alpha",
        "zeta",
    ]
