"""
Task API - Token Issuer/Verifier

Signs and verifies the JWT bearer tokens handed out at login.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from jose import jwt, JWTError

from task_api.config import settings
from task_api.errors import InvalidTokenError


class TokenService:
    """Issue and verify signed, time-limited tokens carrying a user id."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_minutes: int = 60,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_minutes = expires_minutes
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    @classmethod
    def from_settings(cls) -> "TokenService":
        return cls(
            secret=settings.JWT_SECRET,
            algorithm=settings.JWT_ALGORITHM,
            expires_minutes=settings.JWT_EXPIRE_MINUTES,
        )

    def issue(self, user_id: str, expires_delta: Optional[timedelta] = None) -> str:
        """Create a signed token for ``user_id``."""
        if expires_delta is None:
            expires_delta = timedelta(minutes=self.expires_minutes)

        now = self._clock()
        to_encode = {
            "id": user_id,
            "iat": now,
            "exp": now + expires_delta,
        }
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> str:
        """Return the user id embedded in ``token``.

        Raises:
            InvalidTokenError: bad signature, malformed token, expired token,
                or no usable ``id`` claim.
        """
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as e:
            raise InvalidTokenError(reason=str(e)) from e

        user_id = payload.get("id")
        if not isinstance(user_id, str) or not user_id:
            raise InvalidTokenError(reason="token has no user id")
        return user_id
