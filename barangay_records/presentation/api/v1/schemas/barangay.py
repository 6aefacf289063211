from pydantic import BaseModel, ConfigDict


class BarangayResponse(BaseModel):
    """Schema for barangay responses"""

    id: str
    name: str
    address: str | None = None
    municipality: str | None = None
    province: str | None = None
    contact_number: str | None = None
    email: str | None = None
    logo_url: str | None = None
    is_active: bool

    model_config = ConfigDict(from_attributes=True)


class BarangayStatusResponse(BaseModel):
    message: str
    barangay: BarangayResponse
