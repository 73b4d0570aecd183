"""Reusable FastAPI dependencies."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends, Request
from sqlmodel.ext.asyncio.session import AsyncSession

from .core.config import Settings
from .db import Database
from .services import CategoryService, PriorityService, TaskService, UserService


def get_app_settings(request: Request) -> Settings:
    """Return the settings the running application was created with."""

    return request.app.state.settings


def get_database(request: Request) -> Database:
    return request.app.state.database


async def get_db_session(
    database: Annotated[Database, Depends(get_database)],
) -> AsyncIterator[AsyncSession]:
    """Yield one session per request; it is closed (and rolled back) afterwards."""

    async with database.session() as session:
        yield session


SettingsDependency = Annotated[Settings, Depends(get_app_settings)]
DatabaseSessionDependency = Annotated[AsyncSession, Depends(get_db_session)]


def get_user_service(session: DatabaseSessionDependency) -> UserService:
    return UserService(session)


def get_category_service(session: DatabaseSessionDependency) -> CategoryService:
    return CategoryService(session)


def get_priority_service(session: DatabaseSessionDependency) -> PriorityService:
    return PriorityService(session)


def get_task_service(session: DatabaseSessionDependency) -> TaskService:
    return TaskService(session)


UserServiceDependency = Annotated[UserService, Depends(get_user_service)]
CategoryServiceDependency = Annotated[CategoryService, Depends(get_category_service)]
PriorityServiceDependency = Annotated[PriorityService, Depends(get_priority_service)]
TaskServiceDependency = Annotated[TaskService, Depends(get_task_service)]


__all__ = [
    "CategoryServiceDependency",
    "DatabaseSessionDependency",
    "PriorityServiceDependency",
    "SettingsDependency",
    "TaskServiceDependency",
    "UserServiceDependency",
    "get_app_settings",
    "get_database",
    "get_db_session",
]
