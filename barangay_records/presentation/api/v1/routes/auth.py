import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status

from barangay_records.application.services.access_guard import RequestContext
from barangay_records.application.services.auth_service import AuthService
from barangay_records.domain.exceptions import ResourceNotFound
from barangay_records.infrastructure.config.settings import get_settings
from barangay_records.infrastructure.persistence.repositories import UserRepository
from barangay_records.presentation.api.dependencies import (
    get_auth_service, get_user_repo, require_authenticated)
from barangay_records.presentation.api.v1.schemas.token import (
    LoginRequest, RefreshRequest, TokenPair)
from barangay_records.presentation.api.v1.schemas.user import (
    LoginResponse, RegisteredUser, RegisterRequest, RegisterResponse,
    UserResponse)
from barangay_records.presentation.middleware.rate_limit import limiter

router = APIRouter()
settings = get_settings()
logger = logging.getLogger(__name__)


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.login_rate_limit)
async def register(
    request: Request,  # Required by slowapi for rate limiting
    data: RegisterRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
):
    """
    Resident self-registration.

    No tokens are issued; the account waits for approval by an admin of the
    chosen barangay.
    """
    user, barangay = await service.register(
        email=data.email,
        password=data.password,
        barangay_id=data.barangay_id,
        first_name=data.first_name,
        last_name=data.last_name,
    )
    return RegisterResponse(
        message=(
            "Registration successful. Your account is pending approval "
            "from the barangay administrator."
        ),
        user=RegisteredUser(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            barangay_id=barangay.id,
            barangay_name=barangay.name,
            approval_status=user.approval_status,
        ),
    )


@router.post("/login", response_model=LoginResponse)
@limiter.limit(settings.login_rate_limit)
async def login(
    request: Request,  # Required by slowapi for rate limiting (extracts remote address)
    credentials: LoginRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
):
    """
    Exchange email and password for an access/refresh token pair.

    Deactivated accounts, residents awaiting approval and accounts bound to
    an inactive barangay are refused even with the right password.
    """
    tokens, user = await service.login(credentials.email, credentials.password)
    return LoginResponse(
        access_token=tokens.access_token,
        refresh_token=tokens.refresh_token,
        user=UserResponse.model_validate(user),
    )


@router.post("/refresh-token", response_model=TokenPair)
async def refresh_token(
    data: RefreshRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Rotate a refresh token; the old one stops working immediately."""
    return await service.refresh(data.refresh_token)


@router.post("/logout", status_code=status.HTTP_200_OK)
async def logout(
    context: Annotated[RequestContext, Depends(require_authenticated())],
    service: Annotated[AuthService, Depends(get_auth_service)],
):
    await service.logout(context.principal.id)
    logger.info("User %s logged out", context.principal.id)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=UserResponse)
async def me(
    context: Annotated[RequestContext, Depends(require_authenticated())],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
):
    """Profile of the authenticated user"""
    user = await user_repo.get_by_id(context.principal.id)
    if user is None:
        raise ResourceNotFound("User")
    return user
