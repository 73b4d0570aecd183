"""Shared model mixins and utilities."""

from __future__ import annotations

from datetime import datetime, timezone

import sqlalchemy as sa
from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    """Return a timezone-aware UTC timestamp."""
    return datetime.now(timezone.utc)


class CreatedAtMixin(SQLModel, table=False):
    """Mixin providing a creation timestamp stamped by the repository."""

    created_at: datetime | None = Field(
        default=None,
        nullable=False,
        sa_type=sa.DateTime(timezone=True),
    )


class TimestampMixin(CreatedAtMixin, table=False):
    """Mixin providing created/updated timestamps stamped by the repository."""

    updated_at: datetime | None = Field(
        default=None,
        nullable=False,
        sa_type=sa.DateTime(timezone=True),
    )


__all__ = ["CreatedAtMixin", "TimestampMixin", "utcnow"]
