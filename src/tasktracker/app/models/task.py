"""Task domain models built with SQLModel."""

from __future__ import annotations

from enum import Enum

import sqlalchemy as sa
from sqlmodel import Field, Relationship, SQLModel

from .category import Category
from .common import TimestampMixin
from .priority import Priority
from .user import User


class TaskStatus(str, Enum):
    """Enumeration of possible task states."""

    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


def _reference_column(target: str) -> sa.Column:
    # Referenced rows cannot be deleted while a task still points at them.
    return sa.Column(
        sa.Integer(),
        sa.ForeignKey(target, ondelete="RESTRICT"),
        nullable=False,
    )


class TaskBase(SQLModel, table=False):
    """Shared attributes for task models."""

    title: str = Field(
        max_length=255,
        sa_column=sa.Column(sa.String(length=255), nullable=False),
    )
    description: str | None = Field(
        default=None,
        max_length=1000,
        sa_column=sa.Column(sa.String(length=1000), nullable=True),
    )
    status: TaskStatus = Field(
        default=TaskStatus.PENDING,
        sa_column=sa.Column(
            sa.Enum(TaskStatus, name="task_status", native_enum=False, validate_strings=True),
            nullable=False,
        ),
    )
    user_id: int | None = Field(default=None, sa_column=_reference_column("users.id"))
    category_id: int | None = Field(default=None, sa_column=_reference_column("categories.id"))
    priority_id: int | None = Field(default=None, sa_column=_reference_column("priorities.id"))


class Task(TaskBase, TimestampMixin, table=True):
    """Persistent task model.

    The three relationships load eagerly so a task can be projected with its
    user, category and priority without further I/O on an async session.
    """

    __tablename__ = "tasks"
    __table_args__ = (
        sa.Index("ix_tasks_user_id", "user_id"),
        sa.Index("ix_tasks_category_id", "category_id"),
        sa.Index("ix_tasks_priority_id", "priority_id"),
    )

    id: int | None = Field(default=None, primary_key=True)
    user: User = Relationship(sa_relationship_kwargs={"lazy": "selectin"})
    category: Category = Relationship(sa_relationship_kwargs={"lazy": "selectin"})
    priority: Priority = Relationship(sa_relationship_kwargs={"lazy": "selectin"})


__all__ = ["Task", "TaskBase", "TaskStatus"]
