"""Router registrations for the task tracking service."""

from __future__ import annotations

from fastapi import APIRouter

from .categories import router as categories_router
from .health import router as health_router
from .priorities import router as priorities_router
from .tasks import router as tasks_router
from .users import router as users_router

api_router = APIRouter()
api_router.include_router(users_router)
api_router.include_router(categories_router)
api_router.include_router(priorities_router)
api_router.include_router(tasks_router)

__all__ = [
    "api_router",
    "categories_router",
    "health_router",
    "priorities_router",
    "tasks_router",
    "users_router",
]
