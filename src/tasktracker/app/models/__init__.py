"""Domain models exposed for the task tracking service."""

from __future__ import annotations

from .category import Category, CategoryBase
from .common import CreatedAtMixin, TimestampMixin, utcnow
from .priority import Priority, PriorityBase
from .task import Task, TaskBase, TaskStatus
from .user import User, UserBase

__all__ = [
    "Category",
    "CategoryBase",
    "CreatedAtMixin",
    "Priority",
    "PriorityBase",
    "Task",
    "TaskBase",
    "TaskStatus",
    "TimestampMixin",
    "User",
    "UserBase",
    "utcnow",
]
