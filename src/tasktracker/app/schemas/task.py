"""Task-related Pydantic schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import ConfigDict, Field, field_validator

from ..models import TaskStatus
from .base import ApiModel, ensure_utc
from .category import CategoryRead
from .priority import PriorityRead
from .user import UserRead

TASK_READ_EXAMPLE = {
    "id": 1,
    "title": "Draft product documentation",
    "description": "Outline sections for the public API guide.",
    "status": TaskStatus.PENDING.value,
    "user": {
        "id": 42,
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "createdAt": "2024-01-01T09:00:00Z",
    },
    "category": {"id": 3, "name": "Work", "description": "Tasks related to the day job."},
    "priority": {"id": 2, "name": "High", "level": 3},
    "createdAt": "2024-01-01T12:00:00Z",
    "updatedAt": "2024-01-02T08:30:00Z",
}


class TaskRequest(ApiModel):
    """Payload for creating or fully replacing a task.

    Status is not part of this payload: new tasks always start as ``PENDING``
    and existing tasks change status only through the dedicated endpoint.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Draft product documentation",
                "description": "Outline sections for the public API guide.",
                "userId": 42,
                "categoryId": 3,
                "priorityId": 2,
            }
        }
    )

    title: str = Field(min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=1000)
    user_id: int
    category_id: int
    priority_id: int


class TaskStatusUpdate(ApiModel):
    """Payload for moving a task to another status."""

    model_config = ConfigDict(json_schema_extra={"example": {"status": TaskStatus.IN_PROGRESS.value}})

    status: TaskStatus


class TaskRead(ApiModel):
    """Public representation of a task with its relations embedded."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={"example": TASK_READ_EXAMPLE},
    )

    id: int
    title: str
    description: str | None = None
    status: TaskStatus
    user: UserRead
    category: CategoryRead
    priority: PriorityRead
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)


__all__ = [
    "TaskRead",
    "TaskRequest",
    "TaskStatusUpdate",
]
