"""Database repositories for encapsulating persistence logic."""

from __future__ import annotations

from .base import BaseRepository
from .categories import CategoryRepository
from .priorities import PriorityRepository
from .tasks import TaskRepository
from .users import UserRepository

__all__ = [
    "BaseRepository",
    "CategoryRepository",
    "PriorityRepository",
    "TaskRepository",
    "UserRepository",
]
