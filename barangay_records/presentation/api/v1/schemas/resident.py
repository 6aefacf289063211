from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class ResidentBase(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=50)
    middle_name: str | None = Field(None, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    date_of_birth: date | None = None
    gender: str | None = Field(None, max_length=10)
    civil_status: str | None = Field(None, max_length=20)
    address: str = Field(..., min_length=1, max_length=255)
    zone_purok: str | None = Field(None, max_length=50)
    contact_number: str | None = Field(None, max_length=20)
    email: EmailStr | None = None
    voter_status: bool = False


class ResidentCreate(ResidentBase):
    """
    Schema for registering a resident.

    barangay_id is only honored for a super admin without a barangay; for
    everyone else it is replaced with the caller's own barangay.
    """

    barangay_id: str | None = None


class ResidentUpdate(BaseModel):
    """Partial update; the owning barangay can never be changed"""

    first_name: str | None = Field(None, min_length=1, max_length=50)
    middle_name: str | None = Field(None, max_length=50)
    last_name: str | None = Field(None, min_length=1, max_length=50)
    date_of_birth: date | None = None
    gender: str | None = Field(None, max_length=10)
    civil_status: str | None = Field(None, max_length=20)
    address: str | None = Field(None, min_length=1, max_length=255)
    zone_purok: str | None = Field(None, max_length=50)
    contact_number: str | None = Field(None, max_length=20)
    email: EmailStr | None = None
    voter_status: bool | None = None


class ResidentResponse(ResidentBase):
    id: str
    barangay_id: str
    email: str | None = None
    created_by: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


class ResidentListResponse(BaseModel):
    residents: list[ResidentResponse]
    pagination: Pagination
