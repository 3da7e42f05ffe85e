"""Generic async repository over a single SQLAlchemy model.

A repository wraps the request's :class:`AsyncSession`; each write commits on
its own, so one call is one unit of work.
"""
from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

ModelT = TypeVar("ModelT")


class Repository(Generic[ModelT]):
    model: ClassVar[type]

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    def _select(self) -> Select:
        return select(self.model)

    async def get_all(self) -> list[ModelT]:
        result = await self.db.execute(self._select().order_by(self.model.id))
        return list(result.scalars().all())

    async def get_by_id(self, entity_id: int) -> ModelT | None:
        result = await self.db.execute(self._select().where(self.model.id == entity_id))
        return result.scalar_one_or_none()

    async def create(self, **fields: Any) -> ModelT:
        entity = self.model(**fields)
        self.db.add(entity)
        await self.db.commit()
        await self.db.refresh(entity)
        return entity

    async def update(self, entity_id: int, **fields: Any) -> ModelT | None:
        """Change only the supplied fields; ``None`` when the row is missing."""
        entity = await self.get_by_id(entity_id)
        if entity is None:
            return None
        return await self.save(entity, **fields)

    async def save(self, entity: ModelT, **fields: Any) -> ModelT:
        for field, value in fields.items():
            setattr(entity, field, value)
        await self.db.commit()
        await self.db.refresh(entity)
        return entity

    async def delete(self, entity_id: int) -> bool:
        """Delete the row and its dependents; ``False`` when it was missing."""
        exists = await self.db.scalar(select(self.model.id).where(self.model.id == entity_id))
        if exists is None:
            return False

        await self._delete_dependents(entity_id)
        await self.db.execute(delete(self.model).where(self.model.id == entity_id))
        await self.db.commit()
        return True

    async def _delete_dependents(self, entity_id: int) -> None:
        """Hook for repositories whose rows own other rows."""
        return None
