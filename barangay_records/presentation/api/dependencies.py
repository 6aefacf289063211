"""
FastAPI dependencies wiring the authorization core into routes.

Routes declare what they need with one of the require_* factories and
receive an immutable RequestContext argument. Handlers then apply
`query_scope(context.scope)` to reads and the ownership helpers to by-id
access and writes.
"""

from typing import Annotated

from fastapi import BackgroundTasks, Depends, Header
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from barangay_records.application.services.access_guard import (
    AccessGuard, AccessRequirement, RequestContext)
from barangay_records.application.services.auth_service import AuthService
from barangay_records.application.services.identity_resolver import IdentityResolver
from barangay_records.domain.entities.principal import Principal
from barangay_records.domain.enums import Role
from barangay_records.infrastructure.config.settings import get_settings
from barangay_records.infrastructure.persistence.database import (
    AsyncSessionLocal, get_db, get_db_transactional)
from barangay_records.infrastructure.persistence.repositories import (
    AnnouncementRepository, BarangayRepository, ResidentRepository,
    UserRepository)
from barangay_records.shared.telemetry.logging import get_logger
from barangay_records.shared.utils.datetime import utc_now

logger = get_logger(__name__)

AuthorizationHeader = Annotated[str | None, Header(alias="Authorization")]


# Repository dependencies
async def get_user_repo(db: AsyncSession = Depends(get_db)) -> UserRepository:
    """User repository dependency"""
    return UserRepository(db)


async def get_user_repo_transactional(
    db: AsyncSession = Depends(get_db_transactional),
) -> UserRepository:
    """User repository dependency with transaction management"""
    return UserRepository(db)


async def get_barangay_repo(db: AsyncSession = Depends(get_db)) -> BarangayRepository:
    return BarangayRepository(db)


async def get_barangay_repo_transactional(
    db: AsyncSession = Depends(get_db_transactional),
) -> BarangayRepository:
    return BarangayRepository(db)


async def get_resident_repo(db: AsyncSession = Depends(get_db)) -> ResidentRepository:
    return ResidentRepository(db)


async def get_resident_repo_transactional(
    db: AsyncSession = Depends(get_db_transactional),
) -> ResidentRepository:
    return ResidentRepository(db)


async def get_announcement_repo(db: AsyncSession = Depends(get_db)) -> AnnouncementRepository:
    return AnnouncementRepository(db)


async def get_auth_service(
    user_repo: UserRepository = Depends(get_user_repo_transactional),
    barangay_repo: BarangayRepository = Depends(get_barangay_repo_transactional),
) -> AuthService:
    """Credential issuance service with transaction management"""
    return AuthService(user_repo, barangay_repo)


# Authorization core
async def get_identity_resolver(
    user_repo: UserRepository = Depends(get_user_repo),
) -> IdentityResolver:
    """Identity resolver backed by a fresh per-request principal lookup"""
    return IdentityResolver(
        user_repo, lookup_timeout=get_settings().identity_lookup_timeout_seconds
    )


async def get_access_guard(
    resolver: IdentityResolver = Depends(get_identity_resolver),
) -> AccessGuard:
    return AccessGuard(resolver)


async def record_last_seen(user_id: str) -> None:
    """
    Stamp last_seen_at in its own session after the response is sent.

    Best-effort: a failure here is logged and never affects the request.
    """
    try:
        async with AsyncSessionLocal() as session:
            async with session.begin():
                await UserRepository(session).touch_last_seen(user_id, utc_now())
    except SQLAlchemyError as e:
        logger.warning("Could not record last_seen for user %s: %s", user_id, e)


def require_access(requirement: AccessRequirement):
    """
    Dependency factory admitting a request against a requirement.

    Usage:
        @router.get("/")
        async def list_things(
            context: Annotated[RequestContext, Depends(require_module_permission("things", "view"))],
        ):
            ...
    """

    async def admit_request(
        background_tasks: BackgroundTasks,
        guard: Annotated[AccessGuard, Depends(get_access_guard)],
        authorization: AuthorizationHeader = None,
    ) -> RequestContext:
        context = await guard.admit(authorization, requirement)
        if get_settings().track_last_seen:
            background_tasks.add_task(record_last_seen, context.principal.id)
        return context

    return admit_request


def require_authenticated():
    return require_access(AccessRequirement.authenticated())


def require_role(*roles: Role):
    """Caller's role must be one of roles (super_admin always passes)."""
    return require_access(AccessRequirement.any_role(*roles))


def require_module_permission(module: str, action: str):
    return require_access(AccessRequirement.module_permission(module, action))


async def get_optional_principal(
    resolver: Annotated[IdentityResolver, Depends(get_identity_resolver)],
    authorization: AuthorizationHeader = None,
) -> Principal | None:
    """
    Known principal or None. Never rejects.

    Only for public reads that personalize; never for barangay-scoped or
    role-gated data.
    """
    return await resolver.resolve_optional(authorization)
