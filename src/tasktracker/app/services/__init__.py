"""Domain service layer package."""

from __future__ import annotations

from .categories import CategoryService
from .lookups import RecordLookups, resolve_record
from .priorities import PriorityService
from .projection import project_category, project_priority, project_task, project_user
from .tasks import TaskService
from .users import UserService

__all__ = [
    "CategoryService",
    "PriorityService",
    "RecordLookups",
    "TaskService",
    "UserService",
    "project_category",
    "project_priority",
    "project_task",
    "project_user",
    "resolve_record",
]
