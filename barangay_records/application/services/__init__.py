"""Application services: the authorization core and credential issuance."""

from barangay_records.application.services.access_guard import (
    AccessGuard, AccessRequirement, AdmissionDecision, AdmissionState,
    RequestContext)
from barangay_records.application.services.identity_resolver import IdentityResolver

__all__ = [
    "AccessGuard",
    "AccessRequirement",
    "AdmissionDecision",
    "AdmissionState",
    "IdentityResolver",
    "RequestContext",
]
