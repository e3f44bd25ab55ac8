"""
Auth API Router - Registration and login.

Endpoints:
- POST /api/auth/register  {username, password} → 201 {message, userId}
- POST /api/auth/login     {username, password} → 200 {message, token, userId}

The token is a signed, expiring JWT; no endpoint requires it yet.
"""

from logging import getLogger
from typing import Optional
from fastapi import APIRouter, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel, ConfigDict, Field

from branchchat.application.commands.auth import (
    AuthenticateUserCommand,
    AuthenticateUserHandler,
    RegisterUserCommand,
    RegisterUserHandler,
)
from branchchat.domain.exceptions import (
    AuthError,
    ConflictError,
    DomainValidationError,
)

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class CredentialsRequest(BaseModel):
    """Request body for register and login. Missing fields are reported as 400."""

    username: Optional[str] = None
    password: Optional[str] = None


class RegisterResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    user_id: str = Field(alias="userId")


class LoginResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    token: str
    user_id: str = Field(alias="userId")


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/auth", tags=["auth"])


# ==================== ENDPOINTS ====================


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def register(
    request: CredentialsRequest,
    handler: FromDishka[RegisterUserHandler],
):
    """Register a new user."""
    try:
        user_id = await handler.execute(
            RegisterUserCommand(username=request.username, password=request.password)
        )
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e

    return RegisterResponse(message="User registered successfully!", user_id=user_id.value)


@router.post(
    "/login",
    response_model=LoginResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def login(
    request: CredentialsRequest,
    handler: FromDishka[AuthenticateUserHandler],
):
    """Verify credentials and issue a session token."""
    try:
        result = await handler.execute(
            AuthenticateUserCommand(username=request.username, password=request.password)
        )
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except AuthError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e)) from e

    return LoginResponse(
        message="Login successful!",
        token=result.token,
        user_id=result.user_id.value,
    )
