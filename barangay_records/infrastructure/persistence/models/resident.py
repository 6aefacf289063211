from datetime import date

from sqlalchemy import Boolean, Date, String
from sqlalchemy.orm import Mapped, mapped_column

from barangay_records.infrastructure.persistence.database import Base
from barangay_records.infrastructure.persistence.models.mixins import (
    CreatedByMixin, MultiTenantModel)


class Resident(MultiTenantModel, CreatedByMixin, Base):
    """Registered resident of a barangay"""

    __tablename__ = "resident"

    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    middle_name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)
    gender: Mapped[str | None] = mapped_column(String(10), nullable=True)
    civil_status: Mapped[str | None] = mapped_column(String(20), nullable=True)
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    zone_purok: Mapped[str | None] = mapped_column(String(50), nullable=True)
    contact_number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    email: Mapped[str | None] = mapped_column(String(100), nullable=True)
    voter_status: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
