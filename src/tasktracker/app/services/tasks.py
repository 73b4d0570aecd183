"""Service layer encapsulating task-related operations.

Creating or replacing a task first resolves the referenced user, category and
priority, in that order, stopping at the first one that is missing. The reads
and the write share the session's transaction, which is committed only once
every reference has resolved, so a missing reference never leaves a partial
task behind.
"""

from __future__ import annotations

import logging

from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import Category, Priority, Task, TaskStatus, User
from ..repositories import TaskRepository
from ..results import NotFound
from ..schemas import TaskRead
from .lookups import RecordLookups
from .projection import project_task

logger = logging.getLogger(__name__)


class TaskService:
    """High-level business orchestration for ``Task`` entities."""

    def __init__(
        self,
        session: AsyncSession,
        *,
        repository: TaskRepository | None = None,
        lookups: RecordLookups | None = None,
    ) -> None:
        self._session = session
        self._repository = repository or TaskRepository(session)
        self._lookups = lookups or RecordLookups.for_session(session)

    @property
    def repository(self) -> TaskRepository:
        """Expose the underlying repository for advanced scenarios."""
        return self._repository

    async def _resolve_references(
        self,
        user_id: int,
        category_id: int,
        priority_id: int,
    ) -> tuple[User, Category, Priority] | NotFound:
        user = await self._lookups.resolve_user(user_id)
        if isinstance(user, NotFound):
            return user
        category = await self._lookups.resolve_category(category_id)
        if isinstance(category, NotFound):
            return category
        priority = await self._lookups.resolve_priority(priority_id)
        if isinstance(priority, NotFound):
            return priority
        return user.value, category.value, priority.value

    async def create_task(
        self,
        *,
        title: str,
        description: str | None,
        user_id: int,
        category_id: int,
        priority_id: int,
    ) -> TaskRead | NotFound:
        """Create a ``PENDING`` task once all three references resolve."""
        references = await self._resolve_references(user_id, category_id, priority_id)
        if isinstance(references, NotFound):
            logger.info(
                "Task not created",
                extra={"missing_kind": references.kind, "missing_id": references.id},
            )
            return references
        user, category, priority = references
        task = Task(
            title=title,
            description=description,
            status=TaskStatus.PENDING,
            user=user,
            category=category,
            priority=priority,
        )
        await self._repository.create(task)
        await self._session.commit()
        logger.info("Task created", extra={"task_id": task.id, "user_id": user.id})
        return project_task(task)

    async def list_tasks(self) -> list[TaskRead]:
        """Return all tasks in the system."""
        return [project_task(task) for task in await self._repository.list()]

    async def get_task(self, task_id: int) -> TaskRead | NotFound:
        resolved = await self._lookups.resolve_task(task_id)
        if isinstance(resolved, NotFound):
            return resolved
        return project_task(resolved.value)

    async def update_task(
        self,
        task_id: int,
        *,
        title: str,
        description: str | None,
        user_id: int,
        category_id: int,
        priority_id: int,
    ) -> TaskRead | NotFound:
        """Replace a task's fields and references; its status is left untouched."""
        resolved = await self._lookups.resolve_task(task_id)
        if isinstance(resolved, NotFound):
            return resolved
        references = await self._resolve_references(user_id, category_id, priority_id)
        if isinstance(references, NotFound):
            return references
        task = resolved.value
        task.title = title
        task.description = description
        task.user, task.category, task.priority = references
        await self._repository.update(task)
        await self._session.commit()
        logger.info("Task updated", extra={"task_id": task_id})
        return project_task(task)

    async def update_task_status(self, task_id: int, status: TaskStatus) -> TaskRead | NotFound:
        """Move a task to ``status`` without touching any other field."""
        resolved = await self._lookups.resolve_task(task_id)
        if isinstance(resolved, NotFound):
            return resolved
        task = resolved.value
        task.status = status
        await self._repository.update(task)
        await self._session.commit()
        logger.info("Task status changed", extra={"task_id": task_id, "status": status.value})
        return project_task(task)

    async def delete_task(self, task_id: int) -> NotFound | None:
        """Delete a task; the referenced user, category and priority are kept."""
        if not await self._repository.exists(task_id):
            return NotFound(kind="Task", id=task_id)
        await self._repository.delete_by_id(task_id)
        await self._session.commit()
        logger.info("Task deleted", extra={"task_id": task_id})
        return None
