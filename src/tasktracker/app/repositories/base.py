"""Base repository implementation supporting asynchronous SQLModel sessions."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import delete, func
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import CreatedAtMixin, TimestampMixin, utcnow

ModelType = TypeVar("ModelType", bound=SQLModel)


class BaseRepository(Generic[ModelType]):
    """Provide the create/read/update/delete surface shared by every record kind.

    Timestamps are stamped here, immediately before the write, rather than by
    column defaults: ``create`` sets ``created_at`` (and ``updated_at`` where the
    model carries one) and ``update`` refreshes ``updated_at``. Callers are
    expected to confirm existence before calling ``update`` or ``delete_by_id``.

    ``delete_by_id`` issues a bulk ``DELETE`` statement rather than
    ``session.delete(instance)``, so ORM relationship cascades
    (``cascade="all, delete-orphan"`` and the like) never run for it. The
    only reference policy that applies is the database's own foreign-key
    action, currently ``ON DELETE RESTRICT`` on every task reference. A
    cascading policy must be declared on the foreign key, not on the
    relationship.
    """

    def __init__(self, session: AsyncSession, model_type: type[ModelType]) -> None:
        self._session = session
        self._model_type = model_type

    @property
    def session(self) -> AsyncSession:
        """Return the session associated with the repository."""
        return self._session

    @property
    def _id_column(self) -> Any:
        return getattr(self._model_type, "id")

    async def get(self, entity_id: int) -> ModelType | None:
        """Retrieve a model instance by its primary key."""
        return await self._session.get(self._model_type, entity_id)

    async def list(self) -> list[ModelType]:
        """Return every stored entity ordered by identifier."""
        result = await self._session.execute(select(self._model_type).order_by(self._id_column))
        return list(result.scalars().all())

    async def exists(self, entity_id: int) -> bool:
        """Return ``True`` if a record with ``entity_id`` is stored."""
        result = await self._session.execute(
            select(func.count()).select_from(self._model_type).where(self._id_column == entity_id)
        )
        return int(result.scalar_one()) > 0

    async def create(self, instance: ModelType) -> ModelType:
        """Stamp, insert and flush a new entity so its identifier is assigned."""
        now = utcnow()
        if isinstance(instance, CreatedAtMixin):
            instance.created_at = now
        if isinstance(instance, TimestampMixin):
            instance.updated_at = now
        self._session.add(instance)
        await self._session.flush()
        return instance

    async def update(self, instance: ModelType) -> ModelType:
        """Refresh ``updated_at`` and flush pending changes of ``instance``."""
        if isinstance(instance, TimestampMixin):
            instance.updated_at = utcnow()
        self._session.add(instance)
        await self._session.flush()
        return instance

    async def delete_by_id(self, entity_id: int) -> None:
        """Delete the record identified by ``entity_id`` and flush the change."""
        await self._session.execute(
            delete(self._model_type).where(self._id_column == entity_id)
        )
        await self._session.flush()
