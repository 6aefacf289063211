"""Authenticated principal and the data scope derived from it."""

from dataclasses import dataclass

from barangay_records.domain.enums import AccountStatus, Role


@dataclass(frozen=True)
class Principal:
    """
    The authenticated actor behind a request.

    Built from a freshly read user row, never from token claims alone.
    `tenant_active` is the joined active flag of the bound barangay and is
    None when the principal has no barangay.
    """

    id: str
    role: Role
    tenant_id: str | None
    status: AccountStatus = AccountStatus.ACTIVE
    tenant_active: bool | None = None
    email: str | None = None

    @property
    def is_active(self) -> bool:
        return self.status == AccountStatus.ACTIVE

    @property
    def is_unrestricted(self) -> bool:
        """Only a super admin with no barangay sees every tenant."""
        return self.role == Role.SUPER_ADMIN and self.tenant_id is None


@dataclass(frozen=True)
class Scope:
    """Per-request data visibility: all barangays or exactly one."""

    tenant_id: str | None
    unrestricted: bool = False

    def __post_init__(self) -> None:
        if self.unrestricted and self.tenant_id is not None:
            raise ValueError("An unrestricted scope cannot name a tenant")
        if not self.unrestricted and self.tenant_id is None:
            raise ValueError("A restricted scope requires a tenant")

    @classmethod
    def all_tenants(cls) -> "Scope":
        return cls(tenant_id=None, unrestricted=True)

    @classmethod
    def for_tenant(cls, tenant_id: str) -> "Scope":
        return cls(tenant_id=tenant_id, unrestricted=False)
