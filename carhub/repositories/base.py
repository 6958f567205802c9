"""Generic async repository: find-all, find-by-id, insert-or-update save, hard delete."""

from __future__ import annotations

from typing import Generic, TypeVar

from sqlalchemy import inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from carhub.db.base import Base
from carhub.domain.mixins import utc_now

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Generic CRUD repository keyed by an integer ``id`` column.

    ``save`` inserts transient instances (the database assigns the id) and
    writes persistent ones back, always refreshing ``modified_at`` so that every
    write-back is stamped even when no other column changed.
    """

    model: type[ModelT]

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def find_all(self) -> list[ModelT]:
        result = await self._session.execute(select(self.model).order_by(self.model.id))
        return list(result.scalars().all())

    async def find_by_id(self, entity_id: int) -> ModelT | None:
        result = await self._session.execute(
            select(self.model).where(self.model.id == entity_id)
        )
        return result.scalars().first()

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def save(self, instance: ModelT) -> ModelT:
        if inspect(instance).persistent and hasattr(self.model, "modified_at"):
            instance.modified_at = utc_now()
        self._session.add(instance)
        await self._session.flush()  # populate id
        await self._session.refresh(instance)
        return instance

    async def delete(self, instance: ModelT) -> None:
        await self._session.delete(instance)
        await self._session.flush()

    async def commit(self) -> None:
        """Make everything written so far durable, independent of the request's outcome."""
        await self._session.commit()
