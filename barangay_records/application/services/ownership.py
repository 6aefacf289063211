"""
Resource ownership validation for targeted reads and mutations.

A record id can arrive straight from a URL path without ever passing
through a scoped list query, so every by-id access re-checks the record's
barangay against the caller's scope here.
"""

from typing import Any, TypeVar

from barangay_records.application.services.tenant_scope import (
    TENANT_FIELD, require_target_tenant)
from barangay_records.domain.entities.principal import Scope
from barangay_records.domain.exceptions import (CrossTenantAccessDenied,
                                                ResourceNotFound)
from barangay_records.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

RecordType = TypeVar("RecordType")


def ensure_record_access(scope: Scope, record_tenant_id: str | None) -> None:
    """Raise CrossTenantAccessDenied unless the record is inside the scope."""
    if scope.unrestricted:
        return
    if record_tenant_id is None or record_tenant_id != scope.tenant_id:
        raise CrossTenantAccessDenied()


def ensure_visible_record(
    scope: Scope,
    record: RecordType | None,
    resource_type: str,
    tenant_field: str = TENANT_FIELD,
) -> RecordType:
    """
    Return the record if the caller may see it, else raise ResourceNotFound.

    A foreign record and a missing record produce the same error so the
    response never confirms that an id exists in another barangay.
    """
    if record is None:
        raise ResourceNotFound(resource_type)
    try:
        ensure_record_access(scope, getattr(record, tenant_field))
    except CrossTenantAccessDenied:
        logger.warning(
            "Cross-barangay access to %s blocked for scope %s", resource_type, scope.tenant_id
        )
        raise ResourceNotFound(resource_type) from None
    return record


def sanitize_payload(
    scope: Scope, payload: dict[str, Any], tenant_field: str = TENANT_FIELD
) -> dict[str, Any]:
    """
    Copy of payload with the barangay field set from the scope.

    Scoped callers have any client-supplied value overwritten with their own
    barangay. Unrestricted callers must supply one (TenantIdRequired).
    """
    sanitized = dict(payload)
    sanitized[tenant_field] = require_target_tenant(scope, payload.get(tenant_field))
    return sanitized
