from pydantic import BaseModel, EmailStr, Field

from barangay_records.domain.enums import TokenType


class TokenPayload(BaseModel):
    """JWT claims shared by access and refresh tokens"""

    sub: str = Field(..., min_length=1, description="User ID (subject)")
    role: str | None = Field(None, description="Role at issue time (informational)")
    barangay_id: str | None = Field(None, description="Barangay binding at issue time")
    type: TokenType = Field(..., description="Token kind: access or refresh")
    exp: int = Field(..., description="Token expiration timestamp")
    iat: int | None = Field(None, description="Issued-at timestamp")
    jti: str | None = Field(None, description="Unique id (refresh tokens only)")


class LoginRequest(BaseModel):
    """Login credentials"""

    email: EmailStr
    password: str = Field(..., min_length=1)


class RefreshRequest(BaseModel):
    """Refresh token exchange"""

    refresh_token: str = Field(..., min_length=1)


class TokenPair(BaseModel):
    """Access and refresh tokens issued together"""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
