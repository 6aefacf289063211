from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from barangay_records.infrastructure.persistence.database import Base
from barangay_records.infrastructure.persistence.models.mixins import (
    CuidMixin, TimestampMixin)


class Barangay(CuidMixin, TimestampMixin, Base):
    """
    Root tenant entity.

    Barangay has no barangay_id of its own since it is the root of the
    hierarchy; deactivating it locks out every account bound to it.
    """

    __tablename__ = "barangay"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    municipality: Mapped[str | None] = mapped_column(String(100), nullable=True)
    province: Mapped[str | None] = mapped_column(String(100), nullable=True)
    contact_number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    email: Mapped[str | None] = mapped_column(String(100), nullable=True)
    logo_url: Mapped[str | None] = mapped_column(String(255), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)
