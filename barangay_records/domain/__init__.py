"""
Domain layer for the Barangay Records application.

Contains the principal and scope value objects, role and status
enumerations, and the authorization error taxonomy. Nothing here depends
on FastAPI, SQLAlchemy or any other infrastructure concern.
"""

from barangay_records.domain.entities import Principal, Scope
from barangay_records.domain.enums import AccountStatus, ApprovalStatus, Role

__all__ = [
    "AccountStatus",
    "ApprovalStatus",
    "Principal",
    "Role",
    "Scope",
]
