"""
Domain exceptions for the Barangay Records application.

Every authentication and authorization failure is a subclass of
BarangayRecordsException. Each carries the HTTP status it maps to so the
presentation layer can render it with a single handler; none of them is
retried by the server.
"""

from typing import Any


class BarangayRecordsException(Exception):
    """
    Base exception for all Barangay Records application errors.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable error code
        details: Extra fields merged into the response body
        http_status: Status code used when rendered over HTTP
    """

    http_status: int = 400

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_response(self) -> dict[str, Any]:
        """Convert exception to the `{message, ...extra}` response body."""
        return {"message": self.message, **self.details}


# Authentication (401)


class AuthenticationException(BarangayRecordsException):
    """Raised when the caller's identity cannot be established."""

    http_status = 401


class Unauthenticated(AuthenticationException):
    """Authorization header absent or not a bearer credential."""

    def __init__(self, message: str = "No token provided, authorization denied"):
        super().__init__(message, "UNAUTHENTICATED")


class TokenExpired(AuthenticationException):
    """Access token is past its expiry; clients should refresh and retry once."""

    def __init__(self):
        super().__init__("Token expired", "TOKEN_EXPIRED", {"code": "TOKEN_EXPIRED"})


class InvalidToken(AuthenticationException):
    """Signature or structure verification failed."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message, "INVALID_TOKEN")


class PrincipalNotFound(AuthenticationException):
    """Token subject does not match any user."""

    def __init__(self):
        super().__init__("User not found", "PRINCIPAL_NOT_FOUND")


class AccountInactive(AuthenticationException):
    """User account is inactive or suspended."""

    def __init__(self, message: str = "User account is deactivated"):
        super().__init__(message, "ACCOUNT_INACTIVE")


class TenantInactive(AuthenticationException):
    """User is bound to a barangay that is currently inactive."""

    def __init__(self):
        super().__init__("Barangay is currently inactive", "TENANT_INACTIVE")


class InvalidCredentials(AuthenticationException):
    """Login failed; deliberately generic."""

    def __init__(self):
        super().__init__("Invalid email or password", "INVALID_CREDENTIALS")


class AccountPendingApproval(AuthenticationException):
    """Self-registered resident not yet approved by the barangay."""

    def __init__(self, approval_status: str):
        super().__init__(
            "Your account is pending approval from the barangay administrator.",
            "ACCOUNT_PENDING_APPROVAL",
            {"approval_status": approval_status},
        )


class InvalidRefreshToken(AuthenticationException):
    """Refresh credential is malformed, revoked or superseded."""

    def __init__(self, message: str = "Invalid refresh token"):
        super().__init__(message, "INVALID_REFRESH_TOKEN")


class RefreshTokenExpired(AuthenticationException):
    """Refresh credential is past its expiry; a full login is required."""

    def __init__(self):
        super().__init__(
            "Refresh token expired",
            "REFRESH_TOKEN_EXPIRED",
            {"code": "REFRESH_TOKEN_EXPIRED"},
        )


# Authorization (403)


class AuthorizationException(BarangayRecordsException):
    """Raised when an authenticated caller may not perform an operation."""

    http_status = 403


class NoTenantAssigned(AuthorizationException):
    """A non-unrestricted account carries no barangay."""

    def __init__(self):
        super().__init__("No barangay assigned to this user", "NO_TENANT_ASSIGNED")


class InsufficientRole(AuthorizationException):
    """Caller's role does not satisfy the endpoint's requirement."""

    def __init__(self, required: Any, current: str):
        super().__init__(
            "Access denied. Insufficient permissions.",
            "INSUFFICIENT_ROLE",
            {"required": required, "current": current},
        )


class CrossTenantAccessDenied(AuthorizationException):
    """Record belongs to a barangay outside the caller's scope."""

    def __init__(self):
        super().__init__(
            "Access denied. Cannot access data from another barangay.",
            "CROSS_TENANT_ACCESS_DENIED",
        )


# Request shape (400)


class TenantIdRequired(BarangayRecordsException):
    """Unrestricted callers must name the target barangay explicitly."""

    http_status = 400

    def __init__(self):
        super().__init__(
            "barangay_id is required for Super Admin operations",
            "TENANT_ID_REQUIRED",
        )


class InvalidBarangay(BarangayRecordsException):
    """Named barangay does not exist or cannot accept new records."""

    http_status = 400

    def __init__(self, message: str = "Invalid or inactive barangay"):
        super().__init__(message, "INVALID_BARANGAY")


class EmailAlreadyRegistered(BarangayRecordsException):
    http_status = 400

    def __init__(self):
        super().__init__("Email already registered", "EMAIL_ALREADY_REGISTERED")


class NotPendingApproval(BarangayRecordsException):
    """Approval decisions only apply to accounts still awaiting one."""

    http_status = 400

    def __init__(self):
        super().__init__("User is not pending approval", "NOT_PENDING_APPROVAL")


# Lookup (404)


class ResourceNotFound(BarangayRecordsException):
    """Requested record does not exist within the caller's scope."""

    http_status = 404

    def __init__(self, resource_type: str):
        super().__init__(f"{resource_type} not found", "RESOURCE_NOT_FOUND")


# Infrastructure (503)


class IdentityLookupFailed(BarangayRecordsException):
    """Principal lookup timed out or the data store failed; request is rejected."""

    http_status = 503

    def __init__(self):
        super().__init__(
            "Authentication service temporarily unavailable",
            "IDENTITY_LOOKUP_FAILED",
        )
