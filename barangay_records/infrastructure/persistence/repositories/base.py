from abc import ABC
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import object_session

from barangay_records.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(ABC, Generic[ModelType]):
    """
    Base repository implementing common CRUD operations.

    List helpers take an equality filter mapping, which is what
    the tenant scope resolver produces; callers pass it through unchanged
    so the barangay restriction is applied by the query itself.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]):
        self.db = db
        self.model = model

    def _apply_filters(self, stmt: Select, filters: dict[str, Any] | None) -> Select:
        model: Any = self.model
        for column, value in (filters or {}).items():
            stmt = stmt.where(getattr(model, column) == value)
        return stmt

    async def get_by_id(self, id: str) -> ModelType | None:
        """Get a single record by ID"""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == id))
        return result.scalar_one_or_none()

    async def find_all(
        self, filters: dict[str, Any] | None = None, skip: int = 0, limit: int = 100
    ) -> list[ModelType]:
        """Get records matching the equality filters with pagination"""
        stmt = self._apply_filters(select(self.model), filters).offset(skip).limit(limit)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def create(self, obj: ModelType) -> ModelType:
        """Create a new record"""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def update(self, obj: ModelType) -> ModelType:
        """
        Update an existing record.

        Handles potentially detached objects by merging back to session.
        """
        if object_session(obj) is None:
            obj = await self.db.merge(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def delete(self, obj: ModelType) -> None:
        """Delete a record"""
        await self.db.delete(obj)
        await self.db.flush()
