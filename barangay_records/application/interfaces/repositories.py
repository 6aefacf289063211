"""
Repository interfaces (ports) consumed by the authorization core.

Following Dependency Inversion Principle (DIP): the identity resolver only
knows this protocol, the SQLAlchemy UserRepository satisfies it.
"""

from __future__ import annotations

from typing import Protocol

from barangay_records.domain.entities.principal import Principal


class IPrincipalLookup(Protocol):
    """Protocol for loading a principal with its barangay active flag joined"""

    async def get_principal(self, user_id: str) -> Principal | None:
        """Return the live principal for user_id, or None if it does not exist"""
        ...
