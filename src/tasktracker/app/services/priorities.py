"""Service layer orchestrating priority-related repository operations."""

from __future__ import annotations

import logging

from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import Priority
from ..repositories import PriorityRepository
from ..results import NotFound
from ..schemas import PriorityRead
from .lookups import resolve_record
from .projection import project_priority

logger = logging.getLogger(__name__)


class PriorityService:
    """High-level business operations for ``Priority`` entities."""

    def __init__(
        self,
        session: AsyncSession,
        *,
        repository: PriorityRepository | None = None,
    ) -> None:
        self._session = session
        self._repository = repository or PriorityRepository(session)

    @property
    def repository(self) -> PriorityRepository:
        return self._repository

    async def create_priority(self, *, name: str, level: int | None = None) -> PriorityRead:
        priority = await self._repository.create(Priority(name=name, level=level))
        await self._session.commit()
        logger.info("Priority created", extra={"priority_id": priority.id})
        return project_priority(priority)

    async def list_priorities(self) -> list[PriorityRead]:
        return [project_priority(priority) for priority in await self._repository.list()]

    async def get_priority(self, priority_id: int) -> PriorityRead | NotFound:
        resolved = await resolve_record(self._repository, "Priority", priority_id)
        if isinstance(resolved, NotFound):
            return resolved
        return project_priority(resolved.value)

    async def update_priority(
        self,
        priority_id: int,
        *,
        name: str,
        level: int | None = None,
    ) -> PriorityRead | NotFound:
        resolved = await resolve_record(self._repository, "Priority", priority_id)
        if isinstance(resolved, NotFound):
            return resolved
        priority = resolved.value
        priority.name = name
        priority.level = level
        await self._repository.update(priority)
        await self._session.commit()
        logger.info("Priority updated", extra={"priority_id": priority_id})
        return project_priority(priority)

    async def delete_priority(self, priority_id: int) -> NotFound | None:
        if not await self._repository.exists(priority_id):
            return NotFound(kind="Priority", id=priority_id)
        await self._repository.delete_by_id(priority_id)
        await self._session.commit()
        logger.info("Priority deleted", extra={"priority_id": priority_id})
        return None
