import logging
from typing import Annotated, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from motor.motor_asyncio import AsyncIOMotorDatabase

from task_api.database import get_database
from task_api.auth.models import AuthenticatedUser
from task_api.auth.repository import MongoUserRepository, UserRepositoryInterface
from task_api.auth.service import AuthService
from task_api.auth.tokens import TokenService
from task_api.errors import AuthorizationError, InvalidTokenError

logger = logging.getLogger(__name__)

# HTTP Bearer token scheme - auto_error=False to handle missing tokens ourselves
bearer_scheme = HTTPBearer(auto_error=False)


def get_user_repository(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)]
) -> UserRepositoryInterface:
    """Dependency to get the MongoDB user repository."""
    return MongoUserRepository(db)


def get_auth_service(
    repository: Annotated[UserRepositoryInterface, Depends(get_user_repository)]
) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(repository)


def get_token_service() -> TokenService:
    """Dependency to get the token issuer/verifier built from settings."""
    return TokenService.from_settings()


async def get_current_user(
    request: Request,
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> AuthenticatedUser:
    """
    Resolve the caller from the ``Authorization: Bearer`` header.

    - no bearer token: 401 Unauthorized
    - token fails verification: 403 Forbidden
    - valid token: identity returned and stored on ``request.state.user``
    """
    if credentials is None:
        raise AuthorizationError()

    try:
        user_id = token_service.verify(credentials.credentials)
    except InvalidTokenError as e:
        logger.info(f"Rejected bearer token on {request.url.path}: {e.reason}")
        raise

    user = AuthenticatedUser(id=user_id)
    request.state.user = user
    return user


# Type alias for cleaner dependency injection
CurrentUser = Annotated[AuthenticatedUser, Depends(get_current_user)]
