"""
Task API - Authentication Router

Endpoints for user registration and login.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from task_api.auth.dependencies import get_auth_service, get_token_service
from task_api.auth.schemas import (
    UserRegisterRequest,
    UserLoginRequest,
    RegisterResponse,
    TokenResponse,
)
from task_api.auth.service import AuthService
from task_api.auth.tokens import TokenService


router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def register(
    request: UserRegisterRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> RegisterResponse:
    """
    Register a new user with username and password.

    Fails with 500 and the underlying reason when the user cannot be stored,
    including when the username is already taken or a credential is missing.
    A body that is not JSON, or has non-string fields, is rejected with 400.
    """
    user = await auth_service.register_user(
        username=request.username,
        password=request.password,
    )
    return RegisterResponse(user_id=user.id)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login and get access token",
)
async def login(
    request: UserLoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> TokenResponse:
    """
    Authenticate user and return a signed token.

    Unknown users, wrong passwords and missing credentials all return 401.
    A body that is not JSON, or has non-string fields, is rejected with 400.

    Use the returned token in the Authorization header:
    `Authorization: Bearer <token>`
    """
    user = await auth_service.login_user(
        username=request.username,
        password=request.password,
    )
    return TokenResponse(token=token_service.issue(user.id))
