"""
Request admission.

Composes identity resolution, scope resolution and the role policy into one
decision per request:

    START -> AUTHENTICATED -> SCOPED -> AUTHORIZED -> ADMITTED
      \\__________________\\____________\\______________-> REJECTED

Each request is evaluated on its own; nothing survives between requests.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from barangay_records.application.services import role_policy
from barangay_records.application.services.identity_resolver import IdentityResolver
from barangay_records.application.services.tenant_scope import resolve_scope
from barangay_records.domain.entities.principal import Principal, Scope
from barangay_records.domain.enums import Role
from barangay_records.domain.exceptions import (BarangayRecordsException,
                                                InsufficientRole)
from barangay_records.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class AdmissionState(str, Enum):
    START = "start"
    AUTHENTICATED = "authenticated"
    SCOPED = "scoped"
    AUTHORIZED = "authorized"
    ADMITTED = "admitted"
    REJECTED = "rejected"


class RequirementKind(str, Enum):
    AUTHENTICATED = "authenticated"
    ANY_ROLE = "any_role"
    MINIMUM_ROLE = "minimum_role"
    MODULE_PERMISSION = "module_permission"


@dataclass(frozen=True)
class AccessRequirement:
    """The role check an endpoint declares."""

    kind: RequirementKind
    roles: tuple[Role, ...] = ()
    module: str | None = None
    action: str | None = None

    @classmethod
    def authenticated(cls) -> "AccessRequirement":
        return cls(RequirementKind.AUTHENTICATED)

    @classmethod
    def any_role(cls, *roles: Role) -> "AccessRequirement":
        return cls(RequirementKind.ANY_ROLE, roles=tuple(Role(r) for r in roles))

    @classmethod
    def minimum_role(cls, role: Role) -> "AccessRequirement":
        return cls(RequirementKind.MINIMUM_ROLE, roles=(Role(role),))

    @classmethod
    def module_permission(cls, module: str, action: str) -> "AccessRequirement":
        return cls(RequirementKind.MODULE_PERMISSION, module=module, action=action)

    def is_satisfied_by(self, principal: Principal) -> bool:
        if self.kind == RequirementKind.AUTHENTICATED:
            return True
        if self.kind == RequirementKind.ANY_ROLE:
            return role_policy.has_role(principal, self.roles)
        if self.kind == RequirementKind.MINIMUM_ROLE:
            return role_policy.has_minimum_role(principal, self.roles[0])
        assert self.module is not None and self.action is not None
        return role_policy.has_module_permission(principal, self.module, self.action)

    @property
    def required(self) -> Any:
        """What to disclose as `required` when the check fails."""
        if self.kind == RequirementKind.ANY_ROLE:
            return [r.value for r in self.roles]
        if self.kind == RequirementKind.MINIMUM_ROLE:
            return self.roles[0].value
        if self.kind == RequirementKind.MODULE_PERMISSION:
            return f"{self.module}:{self.action}"
        return None


@dataclass(frozen=True)
class RequestContext:
    """
    Resolved principal and scope for one admitted request.

    Passed explicitly into handlers; never stored on a shared object.
    """

    principal: Principal
    scope: Scope

    @property
    def tenant_id(self) -> str | None:
        return self.scope.tenant_id

    @property
    def is_unrestricted(self) -> bool:
        return self.scope.unrestricted


@dataclass
class AdmissionDecision:
    """Outcome of evaluating one request, with the states it passed through."""

    state: AdmissionState = AdmissionState.START
    context: RequestContext | None = None
    error: BarangayRecordsException | None = None
    trail: list[AdmissionState] = field(default_factory=lambda: [AdmissionState.START])

    def advance(self, state: AdmissionState) -> None:
        self.state = state
        self.trail.append(state)

    def reject(self, error: BarangayRecordsException) -> "AdmissionDecision":
        self.error = error
        self.advance(AdmissionState.REJECTED)
        return self

    @property
    def admitted(self) -> bool:
        return self.state == AdmissionState.ADMITTED


class AccessGuard:
    """Admit or reject requests against a declared AccessRequirement."""

    def __init__(self, identity_resolver: IdentityResolver):
        self.identity_resolver = identity_resolver

    async def evaluate(
        self, authorization: str | None, requirement: AccessRequirement
    ) -> AdmissionDecision:
        decision = AdmissionDecision()

        try:
            principal = await self.identity_resolver.resolve(authorization)
        except BarangayRecordsException as e:
            return decision.reject(e)
        decision.advance(AdmissionState.AUTHENTICATED)

        try:
            scope = resolve_scope(principal)
        except BarangayRecordsException as e:
            logger.warning("Principal %s (%s) has no barangay", principal.id, principal.role.value)
            return decision.reject(e)
        decision.advance(AdmissionState.SCOPED)

        if not requirement.is_satisfied_by(principal):
            logger.info(
                "Principal %s denied: role %s does not satisfy %s",
                principal.id,
                principal.role.value,
                requirement.required,
            )
            return decision.reject(
                InsufficientRole(required=requirement.required, current=principal.role.value)
            )
        decision.advance(AdmissionState.AUTHORIZED)

        decision.context = RequestContext(principal=principal, scope=scope)
        decision.advance(AdmissionState.ADMITTED)
        return decision

    async def admit(
        self, authorization: str | None, requirement: AccessRequirement
    ) -> RequestContext:
        """Return the request context, or raise the rejection error."""
        decision = await self.evaluate(authorization, requirement)
        if not decision.admitted:
            assert decision.error is not None
            raise decision.error
        assert decision.context is not None
        return decision.context
