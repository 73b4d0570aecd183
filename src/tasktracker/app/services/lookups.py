"""Resolve foreign-key identifiers to stored records or a ``NotFound`` result."""

from __future__ import annotations

from typing import TypeVar

from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import Category, Priority, Task, User
from ..repositories import (
    BaseRepository,
    CategoryRepository,
    PriorityRepository,
    TaskRepository,
    UserRepository,
)
from ..results import Found, NotFound, Resolution

ModelType = TypeVar("ModelType", bound=SQLModel)


async def resolve_record(
    repository: BaseRepository[ModelType],
    kind: str,
    entity_id: int,
) -> Resolution[ModelType]:
    """Fetch ``entity_id`` from ``repository`` or report it missing as ``kind``."""
    record = await repository.get(entity_id)
    if record is None:
        return NotFound(kind=kind, id=entity_id)
    return Found(record)


class RecordLookups:
    """One fetch-or-``NotFound`` validator per record kind."""

    def __init__(
        self,
        *,
        users: UserRepository,
        categories: CategoryRepository,
        priorities: PriorityRepository,
        tasks: TaskRepository,
    ) -> None:
        self._users = users
        self._categories = categories
        self._priorities = priorities
        self._tasks = tasks

    @classmethod
    def for_session(cls, session: AsyncSession) -> "RecordLookups":
        return cls(
            users=UserRepository(session),
            categories=CategoryRepository(session),
            priorities=PriorityRepository(session),
            tasks=TaskRepository(session),
        )

    async def resolve_user(self, user_id: int) -> Resolution[User]:
        return await resolve_record(self._users, "User", user_id)

    async def resolve_category(self, category_id: int) -> Resolution[Category]:
        return await resolve_record(self._categories, "Category", category_id)

    async def resolve_priority(self, priority_id: int) -> Resolution[Priority]:
        return await resolve_record(self._priorities, "Priority", priority_id)

    async def resolve_task(self, task_id: int) -> Resolution[Task]:
        return await resolve_record(self._tasks, "Task", task_id)


__all__ = ["RecordLookups", "resolve_record"]
