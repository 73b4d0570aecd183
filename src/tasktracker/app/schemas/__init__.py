"""Pydantic schemas for public interfaces."""

from __future__ import annotations

from .category import CategoryRead, CategoryRequest
from .priority import PriorityRead, PriorityRequest
from .system import ErrorResponse, HealthCheckResponse, RootResponse
from .task import TaskRead, TaskRequest, TaskStatusUpdate
from .user import UserRead, UserRequest

__all__ = [
    "CategoryRead",
    "CategoryRequest",
    "ErrorResponse",
    "HealthCheckResponse",
    "PriorityRead",
    "PriorityRequest",
    "RootResponse",
    "TaskRead",
    "TaskRequest",
    "TaskStatusUpdate",
    "UserRead",
    "UserRequest",
]
