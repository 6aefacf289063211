import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from barangay_records.application.services.access_guard import RequestContext
from barangay_records.application.services.ownership import ensure_visible_record
from barangay_records.application.services.tenant_scope import query_scope
from barangay_records.domain.enums import AccountStatus, ApprovalStatus, Role
from barangay_records.domain.exceptions import NotPendingApproval
from barangay_records.infrastructure.persistence.models.user import User
from barangay_records.infrastructure.persistence.repositories import UserRepository
from barangay_records.presentation.api.dependencies import (
    get_user_repo, get_user_repo_transactional, require_role)
from barangay_records.presentation.api.v1.schemas.user import (
    ApprovalResponse, PendingUsersResponse, UserResponse)

router = APIRouter()
logger = logging.getLogger(__name__)

RESOURCE = "User"


async def _pending_user(context: RequestContext, repo: UserRepository, user_id: str) -> User:
    user = ensure_visible_record(context.scope, await repo.get_by_id(user_id), RESOURCE)
    if user.approval_status != ApprovalStatus.PENDING.value:
        raise NotPendingApproval()
    return user


@router.get("/pending-approval/list", response_model=PendingUsersResponse)
async def list_pending_approval(
    context: Annotated[RequestContext, Depends(require_role(Role.ADMIN))],
    repo: Annotated[UserRepository, Depends(get_user_repo)],
    skip: int = 0,
    limit: int = 100,
):
    """Self-registered residents awaiting approval in the caller's barangay"""
    users = await repo.find_all(
        query_scope(
            context.scope,
            {"approval_status": ApprovalStatus.PENDING.value, "role": Role.RESIDENT.value},
        ),
        skip=skip,
        limit=limit,
    )
    return PendingUsersResponse(
        users=[UserResponse.model_validate(u) for u in users], count=len(users)
    )


@router.put("/{user_id}/approve", response_model=ApprovalResponse)
async def approve_user(
    user_id: str,
    context: Annotated[RequestContext, Depends(require_role(Role.ADMIN))],
    repo: Annotated[UserRepository, Depends(get_user_repo_transactional)],
):
    user = await _pending_user(context, repo, user_id)
    user = await repo.set_approval(user, ApprovalStatus.APPROVED, AccountStatus.ACTIVE)
    logger.info("User %s approved by %s", user.id, context.principal.id)
    return ApprovalResponse(
        message="User approved successfully", user=UserResponse.model_validate(user)
    )


@router.put("/{user_id}/reject", response_model=ApprovalResponse)
async def reject_user(
    user_id: str,
    context: Annotated[RequestContext, Depends(require_role(Role.ADMIN))],
    repo: Annotated[UserRepository, Depends(get_user_repo_transactional)],
):
    """Reject a registration; the account is deactivated."""
    user = await _pending_user(context, repo, user_id)
    user = await repo.set_approval(user, ApprovalStatus.REJECTED, AccountStatus.INACTIVE)
    logger.info("User %s rejected by %s", user.id, context.principal.id)
    return ApprovalResponse(
        message="User registration rejected", user=UserResponse.model_validate(user)
    )
