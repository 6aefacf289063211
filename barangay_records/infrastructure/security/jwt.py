"""JWT token handling for authentication."""

import secrets
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import ValidationError

from barangay_records.domain.enums import TokenType
from barangay_records.domain.exceptions import (
    InvalidRefreshToken,
    InvalidToken,
    RefreshTokenExpired,
    TokenExpired,
)
from barangay_records.infrastructure.config.settings import get_settings
from barangay_records.presentation.api.v1.schemas.token import TokenPayload
from barangay_records.shared.telemetry.logging import get_logger

settings = get_settings()
logger = get_logger(__name__)


def _encode(claims: dict[str, Any], secret: str, expires_delta: timedelta) -> str:
    now = datetime.now(UTC)
    to_encode = claims.copy()
    to_encode.update({"iat": now, "exp": now + expires_delta})
    encoded_jwt = jwt.encode(to_encode, secret, algorithm=settings.algorithm)
    assert isinstance(encoded_jwt, str)
    return encoded_jwt


def create_access_token(
    user_id: str,
    role: str,
    barangay_id: str | None,
    expires_delta: timedelta | None = None,
) -> str:
    """Create JWT access token carrying user id, role and barangay binding"""
    return _encode(
        {
            "sub": user_id,
            "role": role,
            "barangay_id": barangay_id,
            "type": TokenType.ACCESS.value,
        },
        settings.secret_key,
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes),
    )


def create_refresh_token(user_id: str, expires_delta: timedelta | None = None) -> str:
    """
    Create a longer-lived refresh token.

    The jti makes every issued token unique so a rotated token never
    collides with the one it replaces.
    """
    return _encode(
        {
            "sub": user_id,
            "type": TokenType.REFRESH.value,
            "jti": secrets.token_hex(16),
        },
        settings.effective_refresh_secret,
        expires_delta or timedelta(days=settings.refresh_token_expire_days),
    )


def _decode(token: str, secret: str) -> TokenPayload:
    payload = jwt.decode(token, secret, algorithms=[settings.algorithm])
    if not isinstance(payload, dict):
        raise JWTError("Token payload must be a dictionary")
    return TokenPayload(**payload)


def decode_access_token(token: str) -> TokenPayload:
    """
    Verify and decode an access token.

    Raises:
        TokenExpired: signature is valid but exp has passed
        InvalidToken: any other verification or structure failure
    """
    try:
        claims = _decode(token, settings.secret_key)
    except ExpiredSignatureError as e:
        raise TokenExpired() from e
    except (JWTError, ValidationError) as e:
        logger.info("Access token rejected: %s", type(e).__name__)
        raise InvalidToken() from e

    if claims.type != TokenType.ACCESS:
        raise InvalidToken()
    return claims


def decode_refresh_token(token: str) -> TokenPayload:
    """Verify and decode a refresh token"""
    try:
        claims = _decode(token, settings.effective_refresh_secret)
    except ExpiredSignatureError as e:
        raise RefreshTokenExpired() from e
    except (JWTError, ValidationError) as e:
        raise InvalidRefreshToken() from e

    if claims.type != TokenType.REFRESH:
        raise InvalidRefreshToken()
    return claims
