from typing import Any

from sqlalchemy import Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from barangay_records.infrastructure.persistence.models.resident import Resident
from barangay_records.infrastructure.persistence.repositories.base import BaseRepository


class ResidentRepository(BaseRepository[Resident]):
    """Repository for residents. List queries require a scope filter."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Resident)

    def _search(self, stmt: Select, search: str | None) -> Select:
        if not search:
            return stmt
        pattern = f"%{search}%"
        return stmt.where(
            or_(
                Resident.first_name.ilike(pattern),
                Resident.last_name.ilike(pattern),
                Resident.middle_name.ilike(pattern),
            )
        )

    async def search(
        self,
        filters: dict[str, Any],
        search: str | None = None,
        skip: int = 0,
        limit: int = 10,
    ) -> tuple[list[Resident], int]:
        """Return one page of residents plus the total matching count"""
        stmt = self._search(self._apply_filters(select(Resident), filters), search)
        result = await self.db.execute(
            stmt.order_by(Resident.created_at.desc()).offset(skip).limit(limit)
        )

        count_stmt = self._search(
            self._apply_filters(select(func.count()).select_from(Resident), filters),
            search,
        )
        total = (await self.db.execute(count_stmt)).scalar_one()
        return list(result.scalars().all()), int(total)
