"""
Tenant scope resolution.

Turns an authenticated principal into the Scope every downstream read and
write must honor, plus small pure helpers handlers use to apply it.
"""

from typing import Any

from barangay_records.domain.entities.principal import Principal, Scope
from barangay_records.domain.exceptions import NoTenantAssigned, TenantIdRequired

TENANT_FIELD = "barangay_id"


def resolve_scope(principal: Principal) -> Scope:
    """
    Compute the data scope for a principal.

    A super admin without a barangay is unrestricted. A super admin with a
    barangay is scoped to it like any other account. Anyone else without a
    barangay raises NoTenantAssigned.
    """
    if principal.is_unrestricted:
        return Scope.all_tenants()
    if principal.tenant_id is None:
        raise NoTenantAssigned()
    return Scope.for_tenant(principal.tenant_id)


def _as_scope(subject: Principal | Scope) -> Scope:
    return subject if isinstance(subject, Scope) else resolve_scope(subject)


def query_scope(
    subject: Principal | Scope, extra_filter: dict[str, Any] | None = None
) -> dict[str, Any]:
    """
    Equality filter for a list/read query.

    The barangay key is applied last so a caller-supplied barangay_id in
    extra_filter can never widen a scoped query.
    """
    scope = _as_scope(subject)
    filters = dict(extra_filter or {})
    if not scope.unrestricted:
        filters[TENANT_FIELD] = scope.tenant_id
    return filters


def can_access_tenant(subject: Principal | Scope, target_tenant_id: str | None) -> bool:
    scope = _as_scope(subject)
    if scope.unrestricted:
        return True
    return target_tenant_id is not None and target_tenant_id == scope.tenant_id


def require_target_tenant(scope: Scope, payload_tenant_id: str | None) -> str:
    """
    Barangay a write should land in.

    Scoped callers always get their own barangay, whatever the payload says.
    Unrestricted callers must name one explicitly.
    """
    if scope.unrestricted:
        if not payload_tenant_id:
            raise TenantIdRequired()
        return payload_tenant_id
    assert scope.tenant_id is not None
    return scope.tenant_id
