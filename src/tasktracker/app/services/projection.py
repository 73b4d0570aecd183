"""Map stored records onto the client-facing schemas."""

from __future__ import annotations

from ..models import Category, Priority, Task, User
from ..schemas import CategoryRead, PriorityRead, TaskRead, UserRead


def project_user(user: User) -> UserRead:
    return UserRead.model_validate(user)


def project_category(category: Category) -> CategoryRead:
    return CategoryRead.model_validate(category)


def project_priority(priority: Priority) -> PriorityRead:
    return PriorityRead.model_validate(priority)


def project_task(task: Task) -> TaskRead:
    """Project a task with full user, category and priority representations."""
    return TaskRead(
        id=task.id,
        title=task.title,
        description=task.description,
        status=task.status,
        user=project_user(task.user),
        category=project_category(task.category),
        priority=project_priority(task.priority),
        created_at=task.created_at,
        updated_at=task.updated_at,
    )


__all__ = ["project_category", "project_priority", "project_task", "project_user"]
