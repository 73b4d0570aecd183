"""Priority domain models built with SQLModel."""

from __future__ import annotations

import sqlalchemy as sa
from sqlmodel import Field, SQLModel


class PriorityBase(SQLModel, table=False):
    """Shared attributes for priority models.

    ``level`` orders priorities by urgency; a higher number is more urgent.
    """

    name: str = Field(
        max_length=255,
        sa_column=sa.Column(sa.String(length=255), nullable=False, unique=True),
    )
    level: int | None = Field(
        default=None,
        sa_column=sa.Column(sa.Integer(), nullable=True),
    )


class Priority(PriorityBase, table=True):
    """Persistent priority model."""

    __tablename__ = "priorities"

    id: int | None = Field(default=None, primary_key=True)


__all__ = ["Priority", "PriorityBase"]
