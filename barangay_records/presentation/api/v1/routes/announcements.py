from typing import Annotated

from fastapi import APIRouter, Depends, Query

from barangay_records.domain.entities.principal import Principal
from barangay_records.infrastructure.persistence.repositories import AnnouncementRepository
from barangay_records.presentation.api.dependencies import (
    get_announcement_repo, get_optional_principal)
from barangay_records.presentation.api.v1.schemas.announcement import AnnouncementResponse
from barangay_records.shared.utils.datetime import utc_now

router = APIRouter()


@router.get("/public", response_model=list[AnnouncementResponse])
async def public_announcements(
    repo: Annotated[AnnouncementRepository, Depends(get_announcement_repo)],
    principal: Annotated[Principal | None, Depends(get_optional_principal)],
    barangay_id: str | None = None,
    limit: Annotated[int, Query(ge=1, le=50)] = 10,
):
    """
    Published announcements, no login required.

    A signed-in caller who names no barangay sees their own barangay's
    announcements first; anonymous callers see all barangays.
    """
    if barangay_id is None and principal is not None:
        barangay_id = principal.tenant_id
    return await repo.get_published(utc_now(), barangay_id=barangay_id, limit=limit)
