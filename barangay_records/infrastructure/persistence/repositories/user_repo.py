from __future__ import annotations

from datetime import datetime

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from barangay_records.domain.entities.principal import Principal
from barangay_records.domain.enums import AccountStatus, ApprovalStatus, Role
from barangay_records.infrastructure.persistence.models.barangay import Barangay
from barangay_records.infrastructure.persistence.models.user import User
from barangay_records.infrastructure.persistence.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User operations, including principal lookup."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, User)

    async def get_principal(self, user_id: str) -> Principal | None:
        """
        Load the principal for a user id with the barangay active flag joined.

        Always reads from the database; no result is cached between requests,
        so deactivations take effect on the very next request.
        """
        result = await self.db.execute(
            select(User, Barangay.is_active)
            .outerjoin(Barangay, Barangay.id == User.barangay_id)
            .where(User.id == user_id)
        )
        row = result.one_or_none()
        if row is None:
            return None

        user, tenant_active = row
        return Principal(
            id=user.id,
            role=Role(user.role),
            tenant_id=user.barangay_id,
            status=AccountStatus(user.status),
            tenant_active=tenant_active if user.barangay_id is not None else None,
            email=user.email,
        )

    async def get_by_email_with_barangay(
        self, email: str
    ) -> tuple[User, bool | None] | None:
        """Get user by email together with its barangay active flag"""
        result = await self.db.execute(
            select(User, Barangay.is_active)
            .outerjoin(Barangay, Barangay.id == User.barangay_id)
            .where(User.email == email)
        )
        row = result.one_or_none()
        if row is None:
            return None
        user, tenant_active = row
        return user, tenant_active

    async def set_refresh_token(
        self, user: User, refresh_token: str | None, *, last_login: datetime | None = None
    ) -> User:
        """Store (or clear) the single currently valid refresh token"""
        user.refresh_token = refresh_token
        if last_login is not None:
            user.last_login = last_login
        return await self.update(user)

    async def touch_last_seen(self, user_id: str, seen_at: datetime) -> None:
        await self.db.execute(
            update(User).where(User.id == user_id).values(last_seen_at=seen_at)
        )

    async def get_by_email(self, email: str) -> User | None:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def set_approval(
        self, user: User, approval_status: ApprovalStatus, status: AccountStatus
    ) -> User:
        """Record an approval decision together with the resulting account status"""
        user.approval_status = approval_status.value
        user.status = status.value
        return await self.update(user)
