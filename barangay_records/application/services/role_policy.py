"""
Role ordering and per-module permission tables.

Every check here is a pure, total function of the principal's role: it
never raises and never looks at barangay scope.
"""

from collections.abc import Iterable
from typing import Protocol

from barangay_records.domain.enums import Role

ROLE_HIERARCHY: dict[Role, int] = {
    Role.RESIDENT: 0,
    Role.STAFF: 1,
    Role.TREASURER: 2,
    Role.SECRETARY: 3,
    Role.CAPTAIN: 4,
    Role.ADMIN: 5,
    Role.SUPER_ADMIN: 6,
}

STAFF_PERMISSIONS: dict[str, frozenset[str]] = {
    "residents": frozenset({"view", "create", "edit"}),
    "households": frozenset({"view", "create", "edit"}),
    "documentRequests": frozenset({"view", "create", "updateStatus"}),
    "certificates": frozenset({"view", "issue"}),
    "businesses": frozenset({"view", "create", "edit"}),
    "businessPermits": frozenset({"view"}),
    "incidents": frozenset({"view", "create", "edit"}),
    "officials": frozenset({"view"}),
    "announcements": frozenset({"view"}),
    "events": frozenset({"view"}),
    "reports": frozenset({"viewBasic"}),
    "users": frozenset(),
    "settings": frozenset(),
}

RESIDENT_PERMISSIONS: frozenset[tuple[str, str]] = frozenset(
    (module, action)
    for module in ("announcements", "events", "documentRequests")
    for action in ("view", "create")
)


class HasRole(Protocol):
    role: Role


def _coerce_role(value: object) -> Role | None:
    try:
        return Role(value)
    except ValueError:
        return None


def role_rank(role: object) -> int | None:
    """Order index of a role, or None for an unknown role."""
    coerced = _coerce_role(role)
    return ROLE_HIERARCHY[coerced] if coerced is not None else None


def has_role(principal: HasRole, allowed: Iterable[Role | str]) -> bool:
    """True if the principal's role is allowed; super_admin always passes."""
    role = _coerce_role(principal.role)
    if role is None:
        return False
    if role == Role.SUPER_ADMIN:
        return True
    allowed_roles = {r for r in (_coerce_role(a) for a in allowed) if r is not None}
    return role in allowed_roles


def has_minimum_role(principal: HasRole, threshold: Role | str) -> bool:
    """True if the principal ranks at or above the threshold role."""
    current = role_rank(principal.role)
    required = role_rank(threshold)
    if current is None or required is None:
        return False
    return current >= required


def has_module_permission(principal: HasRole, module: str, action: str) -> bool:
    """
    Module/action check.

    Roles ranked above staff have unconditional access; staff consult
    STAFF_PERMISSIONS; residents consult RESIDENT_PERMISSIONS.
    """
    role = _coerce_role(principal.role)
    if role is None:
        return False
    if ROLE_HIERARCHY[role] > ROLE_HIERARCHY[Role.STAFF]:
        return True
    if role == Role.STAFF:
        return action in STAFF_PERMISSIONS.get(module, frozenset())
    if role == Role.RESIDENT:
        return (module, action) in RESIDENT_PERMISSIONS
    return False
