"""Repository for interacting with category persistence models."""

from __future__ import annotations

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import Category
from .base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    """Concrete repository for CRUD operations on ``Category`` entities."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Category)

    async def get_by_name(self, name: str) -> Category | None:
        result = await self.session.execute(select(Category).where(Category.name == name))
        return result.scalar_one_or_none()
