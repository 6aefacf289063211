from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from barangay_records.infrastructure.persistence.database import Base
from barangay_records.infrastructure.persistence.models.mixins import (
    CreatedByMixin, MultiTenantModel)


class Announcement(MultiTenantModel, CreatedByMixin, Base):
    """Barangay announcement; published ones are visible without login"""

    __tablename__ = "announcement"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(String(20), nullable=False, default="general")
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_pinned: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    published_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
