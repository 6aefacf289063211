import logging
from math import ceil
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from barangay_records.application.services.access_guard import RequestContext
from barangay_records.application.services.ownership import (
    ensure_visible_record, sanitize_payload)
from barangay_records.application.services.tenant_scope import query_scope
from barangay_records.domain.enums import Role
from barangay_records.domain.exceptions import InvalidBarangay
from barangay_records.infrastructure.persistence.models.resident import Resident
from barangay_records.infrastructure.persistence.repositories import (
    BarangayRepository, ResidentRepository)
from barangay_records.presentation.api.dependencies import (
    get_barangay_repo_transactional, get_resident_repo,
    get_resident_repo_transactional, require_module_permission, require_role)
from barangay_records.presentation.api.v1.schemas.resident import (
    Pagination, ResidentCreate, ResidentListResponse, ResidentResponse,
    ResidentUpdate)

router = APIRouter()
logger = logging.getLogger(__name__)

RESOURCE = "Resident"


@router.get("/", response_model=ResidentListResponse)
async def list_residents(
    context: Annotated[RequestContext, Depends(require_module_permission("residents", "view"))],
    repo: Annotated[ResidentRepository, Depends(get_resident_repo)],
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 10,
    search: str | None = None,
    zone_purok: str | None = None,
):
    """List residents in the caller's barangay (all barangays for a super admin)"""
    extra = {"zone_purok": zone_purok} if zone_purok else None
    residents, total = await repo.search(
        query_scope(context.scope, extra),
        search=search,
        skip=(page - 1) * limit,
        limit=limit,
    )
    return ResidentListResponse(
        residents=[ResidentResponse.model_validate(r) for r in residents],
        pagination=Pagination(page=page, limit=limit, total=total, pages=ceil(total / limit)),
    )


@router.get("/{resident_id}", response_model=ResidentResponse)
async def get_resident(
    resident_id: str,
    context: Annotated[RequestContext, Depends(require_module_permission("residents", "view"))],
    repo: Annotated[ResidentRepository, Depends(get_resident_repo)],
):
    resident = await repo.get_by_id(resident_id)
    return ensure_visible_record(context.scope, resident, RESOURCE)


@router.post("/", response_model=ResidentResponse, status_code=status.HTTP_201_CREATED)
async def create_resident(
    data: ResidentCreate,
    context: Annotated[RequestContext, Depends(require_module_permission("residents", "create"))],
    repo: Annotated[ResidentRepository, Depends(get_resident_repo_transactional)],
    barangay_repo: Annotated[BarangayRepository, Depends(get_barangay_repo_transactional)],
):
    """
    Register a resident.

    The record always lands in the caller's barangay; a super admin without
    a barangay must name one.
    """
    payload = sanitize_payload(context.scope, data.model_dump())
    if context.is_unrestricted and await barangay_repo.get_by_id(payload["barangay_id"]) is None:
        raise InvalidBarangay("Barangay not found")
    resident = await repo.create(Resident(**payload, created_by=context.principal.id))
    logger.info("Resident %s created in barangay %s", resident.id, resident.barangay_id)
    return resident


@router.put("/{resident_id}", response_model=ResidentResponse)
async def update_resident(
    resident_id: str,
    data: ResidentUpdate,
    context: Annotated[RequestContext, Depends(require_module_permission("residents", "edit"))],
    repo: Annotated[ResidentRepository, Depends(get_resident_repo_transactional)],
):
    resident = ensure_visible_record(context.scope, await repo.get_by_id(resident_id), RESOURCE)
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(resident, field, value)
    return await repo.update(resident)


@router.delete("/{resident_id}", status_code=status.HTTP_200_OK)
async def delete_resident(
    resident_id: str,
    context: Annotated[RequestContext, Depends(require_role(Role.ADMIN, Role.SUPER_ADMIN))],
    repo: Annotated[ResidentRepository, Depends(get_resident_repo_transactional)],
):
    resident = ensure_visible_record(context.scope, await repo.get_by_id(resident_id), RESOURCE)
    await repo.delete(resident)
    logger.info("Resident %s deleted by %s", resident_id, context.principal.id)
    return {"message": "Resident deleted successfully"}
