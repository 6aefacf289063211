"""Domain entities and value objects."""

from barangay_records.domain.entities.principal import Principal, Scope

__all__ = ["Principal", "Scope"]
