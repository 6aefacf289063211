"""
SQLAlchemy mixins for common model patterns.

Every barangay-owned record composes TenantMixin, which is the single
column the scope filter and the ownership validator key on.
"""
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from barangay_records.shared.utils.generators import generate_cuid


class CuidMixin:
    """
    Mixin for models using CUID as primary key.

    Provides:
        - id: String primary key with automatic CUID generation
    """

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String, primary_key=True, default=generate_cuid)


class TenantMixin:
    """
    Mixin for barangay-scoped models.

    Provides:
        - barangay_id: Required foreign key to barangay with cascade delete
    """

    @declared_attr
    def barangay_id(cls) -> Mapped[str]:
        return mapped_column(
            String,
            ForeignKey("barangay.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )


class TimestampMixin:
    """
    Mixin for timestamp tracking.

    Provides:
        - created_at: Timestamp set on creation (server-side default)
        - updated_at: Timestamp updated on modification
    """

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class CreatedByMixin:
    """Tracks the user who created the record (nullable for seeded data)."""

    @declared_attr
    def created_by(cls) -> Mapped[str | None]:
        return mapped_column(
            String, ForeignKey("user.id", ondelete="SET NULL"), nullable=True
        )


class MultiTenantModel(CuidMixin, TenantMixin, TimestampMixin):
    """
    Complete mixin for standard barangay-scoped models.

    Combines:
        - CuidMixin: CUID primary key
        - TenantMixin: Barangay foreign key
        - TimestampMixin: Created/updated timestamps
    """

    __abstract__ = True
