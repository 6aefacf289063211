from datetime import datetime

from sqlalchemy import (Boolean, CheckConstraint, DateTime, ForeignKey,
                        String, Text)
from sqlalchemy.orm import Mapped, mapped_column

from barangay_records.domain.enums import AccountStatus, ApprovalStatus, Role
from barangay_records.infrastructure.persistence.database import Base
from barangay_records.infrastructure.persistence.models.mixins import (
    CuidMixin, TimestampMixin)


class User(CuidMixin, TimestampMixin, Base):
    """
    User account and source of the authenticated principal.

    barangay_id is nullable only so that a super admin can exist without a
    barangay; every other role must carry one.
    """

    __tablename__ = "user"

    barangay_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("barangay.id", ondelete="CASCADE"), nullable=True, index=True
    )
    email: Mapped[str] = mapped_column(String(100), nullable=False, unique=True, index=True)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String, nullable=False, default=Role.STAFF.value)
    first_name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    status: Mapped[str] = mapped_column(
        String, nullable=False, default=AccountStatus.ACTIVE.value, index=True
    )
    approval_status: Mapped[str] = mapped_column(
        String, nullable=False, default=ApprovalStatus.APPROVED.value
    )
    email_verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    last_login: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    last_seen_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    refresh_token: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (
        CheckConstraint(f"role IN {tuple(Role.values())}", name="user_role_check"),
        CheckConstraint(f"status IN {tuple(AccountStatus.values())}", name="user_status_check"),
        CheckConstraint(
            f"approval_status IN {tuple(ApprovalStatus.values())}",
            name="user_approval_status_check",
        ),
        CheckConstraint(
            "barangay_id IS NOT NULL OR role = 'super_admin'",
            name="user_barangay_required_check",
        ),
    )
