from __future__ import annotations

import logging
from datetime import datetime

import pytest
from fastapi import FastAPI, status
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel

from tasktracker.app.core.logging import RequestContextFilter
from tasktracker.app.errors import ApplicationError, NotFoundError, unwrap
from tasktracker.app.results import NotFound

pytestmark = pytest.mark.asyncio


class ExamplePayload(BaseModel):
    name: str


async def test_application_error_response_schema(app: FastAPI, client: AsyncClient) -> None:
    @app.get("/error/application")
    async def trigger_application_error() -> None:  # pragma: no cover - defined in test
        raise ApplicationError("Example failure", status_code=status.HTTP_409_CONFLICT)

    response = await client.get("/error/application")

    assert response.status_code == status.HTTP_409_CONFLICT
    payload = response.json()
    assert response.headers["X-Request-ID"]
    assert set(payload) == {"timestamp", "status", "error", "message", "path"}
    assert payload["status"] == 409
    assert payload["error"] == "Conflict"
    assert payload["message"] == "Example failure"
    assert payload["path"] == "/error/application"
    assert datetime.fromisoformat(payload["timestamp"]).tzinfo is not None


async def test_not_found_result_maps_to_404(client: AsyncClient) -> None:
    response = await client.get("/api/priorities/8", headers={"X-Request-ID": "req-404"})

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.headers["X-Request-ID"] == "req-404"
    payload = response.json()
    assert payload["status"] == 404
    assert payload["error"] == "Not Found"
    assert payload["message"] == "Priority not found with id: 8"
    assert payload["path"] == "/api/priorities/8"


async def test_unknown_route_keeps_framework_status(client: AsyncClient) -> None:
    response = await client.get("/api/does-not-exist")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    payload = response.json()
    assert payload["error"] == "Not Found"
    assert payload["path"] == "/api/does-not-exist"

    wrong_method = await client.patch("/api/users")
    assert wrong_method.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
    assert wrong_method.json()["status"] == 405


async def test_validation_error_response_schema(app: FastAPI, client: AsyncClient) -> None:
    @app.post("/error/validation")
    async def create_item(_: ExamplePayload) -> None:  # pragma: no cover - defined in test
        return None

    response = await client.post("/error/validation", json={})

    assert response.status_code == 422
    payload = response.json()
    assert payload["status"] == 422
    assert payload["error"] in {"Unprocessable Entity", "Unprocessable Content"}
    assert payload["message"].startswith("name:")
    assert response.headers["X-Request-ID"]


async def test_constraint_violation_exposes_database_message(client: AsyncClient) -> None:
    first = await client.post("/api/users", json={"name": "Ada", "email": "dup@example.com"})
    assert first.status_code == 201

    duplicate = await client.post("/api/users", json={"name": "Ada Again", "email": "dup@example.com"})

    assert duplicate.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    payload = duplicate.json()
    assert payload["error"] == "Internal Server Error"
    assert "UNIQUE constraint failed" in payload["message"]
    assert payload["path"] == "/api/users"


async def test_unhandled_error_exposes_message(app: FastAPI) -> None:
    @app.get("/error/unhandled")
    async def trigger_unhandled_error() -> None:  # pragma: no cover - defined in test
        raise RuntimeError("Something broke")

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.get("/error/unhandled")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    payload = response.json()
    assert payload["status"] == 500
    assert payload["message"] == "Something broke"
    assert payload["path"] == "/error/unhandled"


async def test_unwrap_raises_for_not_found() -> None:
    assert unwrap("value") == "value"

    with pytest.raises(NotFoundError) as excinfo:
        unwrap(NotFound(kind="Task", id=5))

    assert excinfo.value.status_code == status.HTTP_404_NOT_FOUND
    assert excinfo.value.message == "Task not found with id: 5"
    assert excinfo.value.kind == "Task"
    assert excinfo.value.entity_id == 5


class _InMemoryHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.INFO)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


async def test_request_id_attached_to_logs(app: FastAPI, client: AsyncClient) -> None:
    logger = logging.getLogger("tests.error_handling")
    handler = _InMemoryHandler()
    handler.addFilter(RequestContextFilter())
    logger.addHandler(handler)
    original_level = logger.level
    logger.setLevel(logging.INFO)

    @app.get("/log")
    async def emit_log() -> dict[str, str]:  # pragma: no cover - defined in test
        logger.info("Log entry")
        return {"status": "ok"}

    try:
        response = await client.get("/log")
    finally:
        logger.removeHandler(handler)
        logger.setLevel(original_level)
        handler.close()

    request_id = response.headers["X-Request-ID"]
    matching = [record for record in handler.records if record.getMessage() == "Log entry"]
    assert matching
    assert getattr(matching[0], "request_id", None) == request_id
