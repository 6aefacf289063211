from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from barangay_records.infrastructure.persistence.models.announcement import Announcement
from barangay_records.infrastructure.persistence.repositories.base import BaseRepository


class AnnouncementRepository(BaseRepository[Announcement]):
    def __init__(self, db: AsyncSession):
        super().__init__(db, Announcement)

    async def get_published(
        self, as_of: datetime, barangay_id: str | None = None, limit: int = 10
    ) -> list[Announcement]:
        """Published announcements, newest first, optionally for one barangay"""
        stmt = select(Announcement).where(
            Announcement.is_published.is_(True),
            Announcement.published_at <= as_of,
        )
        if barangay_id is not None:
            stmt = stmt.where(Announcement.barangay_id == barangay_id)
        result = await self.db.execute(
            stmt.order_by(Announcement.published_at.desc()).limit(limit)
        )
        return list(result.scalars().all())
