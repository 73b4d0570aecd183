"""Service layer orchestrating user-related repository operations."""

from __future__ import annotations

import logging

from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import User
from ..repositories import UserRepository
from ..results import NotFound
from ..schemas import UserRead
from .lookups import resolve_record
from .projection import project_user

logger = logging.getLogger(__name__)


class UserService:
    """High-level business operations for ``User`` entities."""

    def __init__(self, session: AsyncSession, *, repository: UserRepository | None = None) -> None:
        self._session = session
        self._repository = repository or UserRepository(session)

    @property
    def repository(self) -> UserRepository:
        """Expose the underlying repository for advanced scenarios."""
        return self._repository

    async def create_user(self, *, name: str, email: str) -> UserRead:
        """Create and persist a new user record."""
        user = await self._repository.create(User(name=name, email=email))
        await self._session.commit()
        logger.info("User created", extra={"user_id": user.id})
        return project_user(user)

    async def list_users(self) -> list[UserRead]:
        return [project_user(user) for user in await self._repository.list()]

    async def get_user(self, user_id: int) -> UserRead | NotFound:
        resolved = await resolve_record(self._repository, "User", user_id)
        if isinstance(resolved, NotFound):
            return resolved
        return project_user(resolved.value)

    async def update_user(self, user_id: int, *, name: str, email: str) -> UserRead | NotFound:
        """Replace the mutable fields of an existing user."""
        resolved = await resolve_record(self._repository, "User", user_id)
        if isinstance(resolved, NotFound):
            return resolved
        user = resolved.value
        user.name = name
        user.email = email
        await self._repository.update(user)
        await self._session.commit()
        logger.info("User updated", extra={"user_id": user_id})
        return project_user(user)

    async def delete_user(self, user_id: int) -> NotFound | None:
        """Delete a user by ID; tasks still assigned to it make the store refuse."""
        if not await self._repository.exists(user_id):
            return NotFound(kind="User", id=user_id)
        await self._repository.delete_by_id(user_id)
        await self._session.commit()
        logger.info("User deleted", extra={"user_id": user_id})
        return None
