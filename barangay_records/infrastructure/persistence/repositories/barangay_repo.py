from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from barangay_records.infrastructure.persistence.models.barangay import Barangay
from barangay_records.infrastructure.persistence.repositories.base import BaseRepository


class BarangayRepository(BaseRepository[Barangay]):
    """Repository for the tenant root entity."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Barangay)

    async def get_active(self, skip: int = 0, limit: int = 100) -> list[Barangay]:
        """Get all active barangays with pagination"""
        result = await self.db.execute(
            select(Barangay)
            .where(Barangay.is_active.is_(True))
            .order_by(Barangay.name)
            .offset(skip)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def set_active(self, barangay: Barangay, is_active: bool) -> Barangay:
        barangay.is_active = is_active
        return await self.update(barangay)
