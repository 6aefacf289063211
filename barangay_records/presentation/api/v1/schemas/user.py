from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserResponse(BaseModel):
    """Schema for user responses (excludes password and refresh token)"""

    id: str
    barangay_id: str | None
    email: str
    role: str
    first_name: str | None = None
    last_name: str | None = None
    status: str
    approval_status: str
    email_verified: bool
    last_login: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class LoginResponse(BaseModel):
    """Token pair plus the authenticated user's profile"""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    user: UserResponse


class RegisterRequest(BaseModel):
    """Resident self-registration"""

    email: EmailStr
    password: str = Field(..., min_length=6)
    first_name: str | None = Field(None, max_length=50)
    last_name: str | None = Field(None, max_length=50)
    barangay_id: str = Field(..., min_length=1, description="Barangay to register under")


class RegisteredUser(BaseModel):
    id: str
    email: str
    first_name: str | None = None
    last_name: str | None = None
    barangay_id: str
    barangay_name: str
    approval_status: str


class RegisterResponse(BaseModel):
    message: str
    user: RegisteredUser


class PendingUsersResponse(BaseModel):
    users: list[UserResponse]
    count: int


class ApprovalResponse(BaseModel):
    message: str
    user: UserResponse
