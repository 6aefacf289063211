"""
Application layer interfaces (ports).

These protocols define the contracts between the application layer
and the infrastructure layer, following the Dependency Inversion Principle.
"""

from barangay_records.application.interfaces.repositories import IPrincipalLookup

__all__ = ["IPrincipalLookup"]
