"""Domain enumerations for the Barangay Records application."""

from enum import Enum


class Role(str, Enum):
    """
    User roles, declared lowest to highest.

    The declaration order is informational only; the authoritative ranking
    lives in the role policy lookup table.
    """

    RESIDENT = "resident"
    STAFF = "staff"
    TREASURER = "treasurer"
    SECRETARY = "secretary"
    CAPTAIN = "captain"
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"

    @classmethod
    def values(cls) -> list[str]:
        """Get all valid values"""
        return [role.value for role in cls]


class AccountStatus(str, Enum):
    """User account status enumeration"""

    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"

    @classmethod
    def values(cls) -> list[str]:
        """Get all valid values"""
        return [status.value for status in cls]


class ApprovalStatus(str, Enum):
    """Approval state for self-registered resident accounts"""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    @classmethod
    def values(cls) -> list[str]:
        """Get all valid values"""
        return [status.value for status in cls]


class TokenType(str, Enum):
    """Kinds of signed credential issued at login"""

    ACCESS = "access"
    REFRESH = "refresh"
