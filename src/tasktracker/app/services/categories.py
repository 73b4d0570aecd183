"""Service layer orchestrating category-related repository operations."""

from __future__ import annotations

import logging

from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import Category
from ..repositories import CategoryRepository
from ..results import NotFound
from ..schemas import CategoryRead
from .lookups import resolve_record
from .projection import project_category

logger = logging.getLogger(__name__)


class CategoryService:
    """High-level business operations for ``Category`` entities."""

    def __init__(
        self,
        session: AsyncSession,
        *,
        repository: CategoryRepository | None = None,
    ) -> None:
        self._session = session
        self._repository = repository or CategoryRepository(session)

    @property
    def repository(self) -> CategoryRepository:
        return self._repository

    async def create_category(self, *, name: str, description: str | None = None) -> CategoryRead:
        category = await self._repository.create(Category(name=name, description=description))
        await self._session.commit()
        logger.info("Category created", extra={"category_id": category.id})
        return project_category(category)

    async def list_categories(self) -> list[CategoryRead]:
        return [project_category(category) for category in await self._repository.list()]

    async def get_category(self, category_id: int) -> CategoryRead | NotFound:
        resolved = await resolve_record(self._repository, "Category", category_id)
        if isinstance(resolved, NotFound):
            return resolved
        return project_category(resolved.value)

    async def update_category(
        self,
        category_id: int,
        *,
        name: str,
        description: str | None = None,
    ) -> CategoryRead | NotFound:
        resolved = await resolve_record(self._repository, "Category", category_id)
        if isinstance(resolved, NotFound):
            return resolved
        category = resolved.value
        category.name = name
        category.description = description
        await self._repository.update(category)
        await self._session.commit()
        logger.info("Category updated", extra={"category_id": category_id})
        return project_category(category)

    async def delete_category(self, category_id: int) -> NotFound | None:
        if not await self._repository.exists(category_id):
            return NotFound(kind="Category", id=category_id)
        await self._repository.delete_by_id(category_id)
        await self._session.commit()
        logger.info("Category deleted", extra={"category_id": category_id})
        return None
