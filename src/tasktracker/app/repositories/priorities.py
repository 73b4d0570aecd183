"""Repository for interacting with priority persistence models."""

from __future__ import annotations

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import Priority
from .base import BaseRepository


class PriorityRepository(BaseRepository[Priority]):
    """Concrete repository for CRUD operations on ``Priority`` entities."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Priority)

    async def get_by_name(self, name: str) -> Priority | None:
        result = await self.session.execute(select(Priority).where(Priority.name == name))
        return result.scalar_one_or_none()
