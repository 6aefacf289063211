""" Repository module for the persistence layer. """

from barangay_records.infrastructure.persistence.repositories.announcement_repo import AnnouncementRepository
from barangay_records.infrastructure.persistence.repositories.barangay_repo import BarangayRepository
from barangay_records.infrastructure.persistence.repositories.base import BaseRepository
from barangay_records.infrastructure.persistence.repositories.resident_repo import ResidentRepository
from barangay_records.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "AnnouncementRepository",
    "BarangayRepository",
    "BaseRepository",
    "ResidentRepository",
    "UserRepository",
]
