"""Security infrastructure - JWT and password handling."""

from barangay_records.infrastructure.security.jwt import (
    create_access_token,
    create_refresh_token,
    decode_access_token,
    decode_refresh_token,
)
from barangay_records.infrastructure.security.password import (
    get_password_hash,
    verify_password,
)

__all__ = [
    "create_access_token",
    "create_refresh_token",
    "decode_access_token",
    "decode_refresh_token",
    "verify_password",
    "get_password_hash",
]
