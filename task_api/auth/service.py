import asyncio
import logging

import bcrypt

from task_api.auth.models import User
from task_api.auth.repository import DuplicateUsernameError, UserRepositoryInterface
from task_api.errors import (
    AuthenticationError,
    InvalidCredentialsError,
    RegistrationError,
)

logger = logging.getLogger(__name__)

# bcrypt only reads the first 72 bytes of its input
BCRYPT_MAX_PASSWORD_BYTES = 72

USERNAME_TAKEN = "Username already exists"
MISSING_CREDENTIALS = "Username and password are required"


class AuthService:
    """Registration and credential checks on top of the user repository.

    bcrypt work runs in a worker thread so hashing does not stall the event loop.
    """

    def __init__(self, repository: UserRepositoryInterface):
        self.repository = repository

    def hash_password(self, password: str) -> str:
        """Hash a password using bcrypt."""
        password_bytes = password.encode("utf-8")
        salt = bcrypt.gensalt()
        return bcrypt.hashpw(password_bytes, salt).decode("utf-8")

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        password_bytes = plain_password.encode("utf-8")
        hashed_bytes = hashed_password.encode("utf-8")
        try:
            return bcrypt.checkpw(password_bytes, hashed_bytes)
        except ValueError:
            # Over-long password or corrupt stored hash
            return False

    async def register_user(self, username: str | None, password: str | None) -> User:
        """Register a new user.

        Uniqueness is enforced by the repository on insert, so two concurrent
        registrations of one username store exactly one user.

        Raises:
            RegistrationError: missing credentials, an over-long password,
                a taken username, or a store failure.
        """
        if not username or not password:
            raise RegistrationError(MISSING_CREDENTIALS)
        if len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise RegistrationError(
                f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes"
            )

        try:
            password_hash = await asyncio.to_thread(self.hash_password, password)
            user = User.create(username=username, password_hash=password_hash)
            created = await self.repository.create(user)
        except DuplicateUsernameError as e:
            logger.info(f"[AuthService] Username '{username}' already taken")
            raise RegistrationError(USERNAME_TAKEN) from e
        except Exception as e:
            logger.error(f"[AuthService] Registration failed for '{username}': {e}", exc_info=True)
            raise RegistrationError(str(e)) from e

        logger.info(f"[AuthService] Registered user '{username}' ({created.id})")
        return created

    async def login_user(self, username: str | None, password: str | None) -> User:
        """Check credentials and return the matching user.

        Missing or empty credentials are treated as a mismatch.

        Raises:
            InvalidCredentialsError: unknown username or wrong password.
            AuthenticationError: the user lookup itself failed.
        """
        if not username or not password:
            raise InvalidCredentialsError()

        try:
            user = await self.repository.get_by_username(username)
        except Exception as e:
            logger.error(f"[AuthService] User lookup failed for '{username}': {e}", exc_info=True)
            raise AuthenticationError(str(e)) from e

        if user is None or not await asyncio.to_thread(
            self.verify_password, password, user.password_hash
        ):
            logger.info(f"[AuthService] Failed login for '{username}'")
            raise InvalidCredentialsError()
        return user
