"""
Credential issuance: login, refresh rotation and logout.

Access tokens are never revoked server-side; they simply expire. Refresh
tokens are revocable because the user row stores the single token that is
currently valid, and logout clears it.
"""

import asyncio

from sqlalchemy.exc import IntegrityError

from barangay_records.domain.enums import AccountStatus, ApprovalStatus, Role
from barangay_records.domain.exceptions import (AccountInactive,
                                                AccountPendingApproval,
                                                EmailAlreadyRegistered,
                                                InvalidBarangay,
                                                InvalidCredentials,
                                                InvalidRefreshToken,
                                                TenantInactive)
from barangay_records.infrastructure.persistence.models.barangay import Barangay
from barangay_records.infrastructure.persistence.models.user import User
from barangay_records.infrastructure.persistence.repositories.barangay_repo import \
    BarangayRepository
from barangay_records.infrastructure.persistence.repositories.user_repo import \
    UserRepository
from barangay_records.infrastructure.security.jwt import (
    create_access_token, create_refresh_token, decode_refresh_token)
from barangay_records.infrastructure.security.password import (
    DUMMY_PASSWORD_HASH, get_password_hash, verify_password)
from barangay_records.presentation.api.v1.schemas.token import TokenPair
from barangay_records.shared.telemetry.logging import get_logger
from barangay_records.shared.utils.datetime import utc_now

logger = get_logger(__name__)


class AuthService:
    def __init__(self, user_repo: UserRepository, barangay_repo: BarangayRepository):
        self.user_repo = user_repo
        self.barangay_repo = barangay_repo

    async def register(
        self,
        email: str,
        password: str,
        barangay_id: str,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> tuple[User, Barangay]:
        """
        Self-register a resident account.

        The account is created active but pending approval, so no tokens are
        issued until an admin of the chosen barangay approves it.
        """
        if await self.user_repo.get_by_email(email) is not None:
            raise EmailAlreadyRegistered()

        barangay = await self.barangay_repo.get_by_id(barangay_id)
        if barangay is None or not barangay.is_active:
            raise InvalidBarangay()

        hashed_password = await asyncio.to_thread(get_password_hash, password)
        user = User(
            email=email,
            hashed_password=hashed_password,
            first_name=first_name,
            last_name=last_name,
            barangay_id=barangay.id,
            role=Role.RESIDENT.value,
            status=AccountStatus.ACTIVE.value,
            approval_status=ApprovalStatus.PENDING.value,
            email_verified=False,
        )
        try:
            user = await self.user_repo.create(user)
        except IntegrityError as e:
            raise EmailAlreadyRegistered() from e

        logger.info("Resident %s registered in barangay %s, pending approval", user.id, barangay.id)
        return user, barangay

    async def login(self, email: str, password: str) -> tuple[TokenPair, User]:
        """
        Authenticate by email and password and issue a token pair.

        The password is verified before any account state is reported so
        that status messages are only revealed to the account's owner.
        """
        found = await self.user_repo.get_by_email_with_barangay(email)
        if found is None:
            await asyncio.to_thread(verify_password, password, DUMMY_PASSWORD_HASH)
            logger.warning("Failed login attempt for unknown email")
            raise InvalidCredentials()

        user, tenant_active = found
        if not await asyncio.to_thread(verify_password, password, user.hashed_password):
            logger.warning("Failed login attempt for user: %s", user.id)
            raise InvalidCredentials()

        if user.status != AccountStatus.ACTIVE.value:
            raise AccountInactive("Account is deactivated. Please contact administrator.")

        if user.role == Role.RESIDENT.value and user.approval_status != ApprovalStatus.APPROVED.value:
            raise AccountPendingApproval(user.approval_status)

        if user.barangay_id is not None and tenant_active is not True:
            raise TenantInactive()

        tokens = self._issue(user)
        await self.user_repo.set_refresh_token(user, tokens.refresh_token, last_login=utc_now())
        logger.info("Successful login for user: %s in barangay: %s", user.id, user.barangay_id)
        return tokens, user

    async def refresh(self, refresh_token: str) -> TokenPair:
        """Exchange a valid, current refresh token for a new pair (rotation)."""
        claims = decode_refresh_token(refresh_token)

        user = await self.user_repo.get_by_id(claims.sub)
        if user is None or user.refresh_token != refresh_token:
            logger.warning("Refresh rejected for subject %s: token not current", claims.sub)
            raise InvalidRefreshToken()

        if user.status != AccountStatus.ACTIVE.value:
            raise AccountInactive()

        if user.barangay_id is not None:
            barangay = await self.barangay_repo.get_by_id(user.barangay_id)
            if barangay is None or not barangay.is_active:
                raise TenantInactive()

        tokens = self._issue(user)
        await self.user_repo.set_refresh_token(user, tokens.refresh_token)
        return tokens

    async def logout(self, user_id: str) -> None:
        """Revoke the stored refresh token; outstanding access tokens run out."""
        user = await self.user_repo.get_by_id(user_id)
        if user is not None:
            await self.user_repo.set_refresh_token(user, None)

    @staticmethod
    def _issue(user: User) -> TokenPair:
        return TokenPair(
            access_token=create_access_token(user.id, user.role, user.barangay_id),
            refresh_token=create_refresh_token(user.id),
        )
