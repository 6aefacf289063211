"""
Identity resolution: bearer credential in, live principal out.

Verification is synchronous; the principal lookup is the only await and it
is bounded by a timeout. A timed-out or failed lookup rejects the request
rather than letting it through.
"""

import asyncio
from collections.abc import Callable

from sqlalchemy.exc import SQLAlchemyError

from barangay_records.application.interfaces.repositories import IPrincipalLookup
from barangay_records.domain.entities.principal import Principal
from barangay_records.domain.exceptions import (AccountInactive,
                                                BarangayRecordsException,
                                                IdentityLookupFailed,
                                                PrincipalNotFound,
                                                TenantInactive,
                                                Unauthenticated)
from barangay_records.infrastructure.security.jwt import decode_access_token
from barangay_records.presentation.api.v1.schemas.token import TokenPayload
from barangay_records.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

BEARER_SCHEME = "bearer"


def extract_bearer_token(authorization: str | None) -> str:
    """Return the token from an `Authorization: Bearer <token>` header value."""
    if not authorization:
        raise Unauthenticated()
    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != BEARER_SCHEME or not token or " " in token:
        raise Unauthenticated()
    return token


class IdentityResolver:
    """
    Resolve a request's credential to an admitted principal.

    Failure order: Unauthenticated, TokenExpired / InvalidToken,
    PrincipalNotFound, AccountInactive, TenantInactive.
    """

    def __init__(
        self,
        principals: IPrincipalLookup,
        *,
        lookup_timeout: float | None = None,
        token_decoder: Callable[[str], TokenPayload] = decode_access_token,
    ):
        self.principals = principals
        self.lookup_timeout = lookup_timeout
        self.decode_token = token_decoder

    async def resolve(self, authorization: str | None) -> Principal:
        token = extract_bearer_token(authorization)
        claims = self.decode_token(token)

        principal = await self._lookup(claims.sub)
        if principal is None:
            logger.info("Token subject %s no longer exists", claims.sub)
            raise PrincipalNotFound()

        if not principal.is_active:
            logger.info("Rejected %s principal %s", principal.status.value, principal.id)
            raise AccountInactive()

        # A bound principal whose barangay row is missing is treated as inactive.
        if principal.tenant_id is not None and principal.tenant_active is not True:
            logger.info(
                "Rejected principal %s: barangay %s inactive", principal.id, principal.tenant_id
            )
            raise TenantInactive()

        return principal

    async def resolve_optional(self, authorization: str | None) -> Principal | None:
        """
        Resolve if possible, otherwise treat the caller as anonymous.

        Only for endpoints that personalize content but never gate it.
        """
        if not authorization:
            return None
        try:
            return await self.resolve(authorization)
        except BarangayRecordsException as e:
            logger.debug("Optional auth fell back to anonymous: %s", e.error_code)
            return None
        except Exception as e:
            # CancelledError is a BaseException and still propagates.
            logger.warning("Optional auth lookup failed, treating caller as anonymous: %r", e)
            return None

    async def _lookup(self, user_id: str) -> Principal | None:
        try:
            return await asyncio.wait_for(
                self.principals.get_principal(user_id), timeout=self.lookup_timeout
            )
        except TimeoutError as e:
            logger.error("Principal lookup timed out after %ss", self.lookup_timeout)
            raise IdentityLookupFailed() from e
        except SQLAlchemyError as e:
            logger.error("Principal lookup failed: %s", e)
            raise IdentityLookupFailed() from e
