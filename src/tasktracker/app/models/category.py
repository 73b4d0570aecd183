"""Category domain models built with SQLModel."""

from __future__ import annotations

import sqlalchemy as sa
from sqlmodel import Field, SQLModel


class CategoryBase(SQLModel, table=False):
    """Shared attributes for category models."""

    name: str = Field(
        max_length=255,
        sa_column=sa.Column(sa.String(length=255), nullable=False, unique=True),
    )
    description: str | None = Field(
        default=None,
        max_length=500,
        sa_column=sa.Column(sa.String(length=500), nullable=True),
    )


class Category(CategoryBase, table=True):
    """Persistent category model."""

    __tablename__ = "categories"

    id: int | None = Field(default=None, primary_key=True)


__all__ = ["Category", "CategoryBase"]
