"""Seed script for populating reference data."""

from __future__ import annotations

import asyncio
import logging

from sqlmodel.ext.asyncio.session import AsyncSession

from ..core.config import get_settings
from ..core.logging import configure_logging
from ..services import CategoryService, PriorityService
from .session import Database

logger = logging.getLogger(__name__)

DEFAULT_PRIORITIES: tuple[tuple[str, int], ...] = (
    ("Low", 1),
    ("Medium", 2),
    ("High", 3),
    ("Critical", 4),
)

DEFAULT_CATEGORIES: tuple[tuple[str, str], ...] = (
    ("Work", "Tasks related to the day job."),
    ("Personal", "Errands and personal projects."),
)


async def seed(session: AsyncSession) -> int:
    """Insert any missing default priorities and categories.

    Returns the number of records created; running it twice creates nothing
    the second time.
    """
    priority_service = PriorityService(session)
    category_service = CategoryService(session)
    created = 0

    for name, level in DEFAULT_PRIORITIES:
        if await priority_service.repository.get_by_name(name) is None:
            await priority_service.create_priority(name=name, level=level)
            created += 1

    for name, description in DEFAULT_CATEGORIES:
        if await category_service.repository.get_by_name(name) is None:
            await category_service.create_category(name=name, description=description)
            created += 1

    logger.info("Seed complete", extra={"created": created})
    return created


async def _seed_configured_database() -> None:
    settings = get_settings()
    configure_logging(settings)
    database = Database.from_settings(settings)
    try:
        if settings.db_create_all:
            await database.create_all()
        async with database.session() as session:
            await seed(session)
    finally:
        await database.dispose()


def main() -> None:
    """Entry-point hook for ``python -m`` execution."""
    asyncio.run(_seed_configured_database())


if __name__ == "__main__":  # pragma: no cover - manual execution entry-point
    main()
