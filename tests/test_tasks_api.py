from __future__ import annotations

from collections.abc import Awaitable, Callable
from datetime import datetime
from typing import Any

import pytest
from httpx import AsyncClient

from tasktracker.app.models import TaskStatus

pytestmark = pytest.mark.asyncio

Factory = Callable[..., Awaitable[dict[str, Any]]]


@pytest.fixture
def references(
    create_user: Factory,
    create_category: Factory,
    create_priority: Factory,
) -> Callable[[], Awaitable[tuple[dict[str, Any], dict[str, Any], dict[str, Any]]]]:
    async def _create() -> tuple[dict[str, Any], dict[str, Any], dict[str, Any]]:
        return await create_user(), await create_category(), await create_priority()

    return _create


def _task_payload(user: dict, category: dict, priority: dict, **overrides: Any) -> dict[str, Any]:
    payload = {
        "title": "Write onboarding checklist",
        "description": "Prepare the initial onboarding tasks for new teammates.",
        "userId": user["id"],
        "categoryId": category["id"],
        "priorityId": priority["id"],
    }
    payload.update(overrides)
    return payload


async def test_task_crud_flow(client: AsyncClient, references) -> None:
    user, category, priority = await references()

    create_response = await client.post("/api/tasks", json=_task_payload(user, category, priority))
    assert create_response.status_code == 201
    task = create_response.json()
    assert task["id"] > 0
    assert task["status"] == TaskStatus.PENDING.value
    assert task["user"] == user
    assert task["category"] == category
    assert task["priority"] == priority
    assert task["createdAt"] == task["updatedAt"]

    detail_response = await client.get(f"/api/tasks/{task['id']}")
    assert detail_response.status_code == 200
    assert detail_response.json() == task

    list_response = await client.get("/api/tasks")
    assert list_response.status_code == 200
    assert [item["id"] for item in list_response.json()] == [task["id"]]

    delete_response = await client.delete(f"/api/tasks/{task['id']}")
    assert delete_response.status_code == 204

    missing = await client.get(f"/api/tasks/{task['id']}")
    assert missing.status_code == 404
    assert missing.json()["message"] == f"Task not found with id: {task['id']}"

    # Deleting the task leaves its references in place.
    assert (await client.get(f"/api/users/{user['id']}")).status_code == 200
    assert (await client.get(f"/api/categories/{category['id']}")).status_code == 200
    assert (await client.get(f"/api/priorities/{priority['id']}")).status_code == 200


async def test_create_task_ignores_client_supplied_status(client: AsyncClient, references) -> None:
    user, category, priority = await references()

    response = await client.post(
        "/api/tasks",
        json=_task_payload(user, category, priority, status=TaskStatus.DONE.value),
    )

    assert response.status_code == 201
    assert response.json()["status"] == TaskStatus.PENDING.value


async def test_create_task_accepts_snake_case_fields(client: AsyncClient, references) -> None:
    user, category, priority = await references()

    response = await client.post(
        "/api/tasks",
        json={
            "title": "Snake case",
            "user_id": user["id"],
            "category_id": category["id"],
            "priority_id": priority["id"],
        },
    )

    assert response.status_code == 201
    assert response.json()["description"] is None


async def test_create_task_with_missing_user_writes_nothing(client: AsyncClient, references) -> None:
    _, category, priority = await references()

    response = await client.post(
        "/api/tasks",
        json=_task_payload({"id": 999}, category, priority),
    )

    assert response.status_code == 404
    payload = response.json()
    assert payload["message"] == "User not found with id: 999"
    assert payload["error"] == "Not Found"
    assert payload["path"] == "/api/tasks"

    listing = await client.get("/api/tasks")
    assert listing.json() == []


async def test_missing_category_reported_before_missing_priority(
    client: AsyncClient,
    create_user: Factory,
) -> None:
    user = await create_user()

    response = await client.post(
        "/api/tasks",
        json=_task_payload(user, {"id": 501}, {"id": 502}),
    )

    assert response.status_code == 404
    assert response.json()["message"] == "Category not found with id: 501"


async def test_missing_priority_reported_last(
    client: AsyncClient,
    create_user: Factory,
    create_category: Factory,
) -> None:
    user = await create_user()
    category = await create_category()

    response = await client.post(
        "/api/tasks",
        json=_task_payload(user, category, {"id": 77}),
    )

    assert response.status_code == 404
    assert response.json()["message"] == "Priority not found with id: 77"


async def test_update_task_replaces_fields_but_keeps_status(
    client: AsyncClient,
    references,
    create_user: Factory,
) -> None:
    user, category, priority = await references()
    task = (await client.post("/api/tasks", json=_task_payload(user, category, priority))).json()

    done = await client.put(f"/api/tasks/{task['id']}/status", json={"status": "DONE"})
    assert done.status_code == 200
    assert done.json()["status"] == TaskStatus.DONE.value

    new_owner = await create_user(name="Grace Hopper")
    update_response = await client.put(
        f"/api/tasks/{task['id']}",
        json=_task_payload(new_owner, category, priority, title="Renamed", description=None),
    )

    assert update_response.status_code == 200
    updated = update_response.json()
    assert updated["title"] == "Renamed"
    assert updated["description"] is None
    assert updated["user"] == new_owner
    assert updated["status"] == TaskStatus.DONE.value
    assert updated["createdAt"] == task["createdAt"]

    fetched = await client.get(f"/api/tasks/{task['id']}")
    assert fetched.json()["status"] == TaskStatus.DONE.value
    assert fetched.json()["user"]["id"] == new_owner["id"]


async def test_update_task_with_missing_reference_leaves_task_unchanged(
    client: AsyncClient,
    references,
) -> None:
    user, category, priority = await references()
    task = (await client.post("/api/tasks", json=_task_payload(user, category, priority))).json()

    response = await client.put(
        f"/api/tasks/{task['id']}",
        json=_task_payload(user, category, {"id": 404}, title="Should not stick"),
    )

    assert response.status_code == 404
    assert response.json()["message"] == "Priority not found with id: 404"
    assert (await client.get(f"/api/tasks/{task['id']}")).json()["title"] == task["title"]


async def test_update_unknown_task_returns_not_found(client: AsyncClient, references) -> None:
    user, category, priority = await references()

    response = await client.put("/api/tasks/12", json=_task_payload(user, category, priority))
    status_response = await client.put("/api/tasks/12/status", json={"status": "DONE"})

    assert response.status_code == 404
    assert response.json()["message"] == "Task not found with id: 12"
    assert status_response.status_code == 404


async def test_status_change_refreshes_updated_at(client: AsyncClient, references) -> None:
    user, category, priority = await references()
    task = (await client.post("/api/tasks", json=_task_payload(user, category, priority))).json()

    response = await client.put(f"/api/tasks/{task['id']}/status", json={"status": "IN_PROGRESS"})
    assert response.status_code == 200

    fetched = (await client.get(f"/api/tasks/{task['id']}")).json()
    assert fetched["status"] == TaskStatus.IN_PROGRESS.value
    assert fetched["title"] == task["title"]
    assert datetime.fromisoformat(fetched["updatedAt"]) > datetime.fromisoformat(fetched["createdAt"])


async def test_unknown_status_is_rejected(client: AsyncClient, references) -> None:
    user, category, priority = await references()
    task = (await client.post("/api/tasks", json=_task_payload(user, category, priority))).json()

    response = await client.put(f"/api/tasks/{task['id']}/status", json={"status": "ARCHIVED"})

    assert response.status_code == 422
    assert response.json()["status"] == 422


async def test_identical_creates_produce_distinct_tasks(client: AsyncClient, references) -> None:
    user, category, priority = await references()
    payload = _task_payload(user, category, priority)

    first = await client.post("/api/tasks", json=payload)
    second = await client.post("/api/tasks", json=payload)

    assert first.status_code == second.status_code == 201
    assert first.json()["id"] != second.json()["id"]
    assert len((await client.get("/api/tasks")).json()) == 2


async def test_delete_unknown_task_returns_not_found(client: AsyncClient) -> None:
    response = await client.delete("/api/tasks/3")

    assert response.status_code == 404
    assert response.json()["message"] == "Task not found with id: 3"


async def test_deleting_referenced_user_is_refused(client: AsyncClient, references) -> None:
    user, category, priority = await references()
    task = (await client.post("/api/tasks", json=_task_payload(user, category, priority))).json()

    response = await client.delete(f"/api/users/{user['id']}")

    assert response.status_code == 500
    payload = response.json()
    assert payload["error"] == "Internal Server Error"
    assert "FOREIGN KEY constraint failed" in payload["message"]

    still_there = await client.get(f"/api/tasks/{task['id']}")
    assert still_there.status_code == 200
    assert still_there.json()["user"]["id"] == user["id"]
