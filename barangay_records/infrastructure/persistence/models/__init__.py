from barangay_records.infrastructure.persistence.models.announcement import Announcement
from barangay_records.infrastructure.persistence.models.barangay import Barangay
# Mixins for model composition
from barangay_records.infrastructure.persistence.models.mixins import (
    CreatedByMixin, CuidMixin, MultiTenantModel, TenantMixin, TimestampMixin)
from barangay_records.infrastructure.persistence.models.resident import Resident
from barangay_records.infrastructure.persistence.models.user import User

__all__ = [
    # Models
    "Announcement",
    "Barangay",
    "Resident",
    "User",
    # Mixins
    "CreatedByMixin",
    "CuidMixin",
    "MultiTenantModel",
    "TenantMixin",
    "TimestampMixin",
]
