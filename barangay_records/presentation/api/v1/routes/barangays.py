import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from barangay_records.application.services.access_guard import RequestContext
from barangay_records.application.services.ownership import ensure_visible_record
from barangay_records.domain.enums import Role
from barangay_records.infrastructure.persistence.repositories import BarangayRepository
from barangay_records.presentation.api.dependencies import (
    get_barangay_repo, get_barangay_repo_transactional, require_role)
from barangay_records.presentation.api.v1.schemas.barangay import (
    BarangayResponse, BarangayStatusResponse)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/", response_model=list[BarangayResponse])
async def list_barangays(
    repo: Annotated[BarangayRepository, Depends(get_barangay_repo)],
    skip: int = 0,
    limit: int = 100,
):
    """Active barangays, for registration and login pickers"""
    return await repo.get_active(skip, limit)


@router.put("/{barangay_id}/toggle-status", response_model=BarangayStatusResponse)
async def toggle_barangay_status(
    barangay_id: str,
    context: Annotated[RequestContext, Depends(require_role(Role.SUPER_ADMIN))],
    repo: Annotated[BarangayRepository, Depends(get_barangay_repo_transactional)],
):
    """
    Activate or deactivate a barangay.

    Deactivation locks out every account bound to the barangay from the
    next request on.
    """
    barangay = ensure_visible_record(
        context.scope, await repo.get_by_id(barangay_id), "Barangay", tenant_field="id"
    )
    barangay = await repo.set_active(barangay, not barangay.is_active)
    state = "activated" if barangay.is_active else "deactivated"
    logger.info("Barangay %s %s by %s", barangay.id, state, context.principal.id)
    return BarangayStatusResponse(
        message=f"Barangay {state} successfully",
        barangay=BarangayResponse.model_validate(barangay),
    )
