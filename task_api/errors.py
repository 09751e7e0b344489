"""
Task API - Error Types

Every failure surfaced to a client is an AppError subclass. The application
renders them as {"message": ...} with the class status code.
"""

from typing import Optional

from fastapi import status


class AppError(Exception):
    """Base class for errors that map to an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Client-supplied data is missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class AuthenticationError(AppError):
    """Login could not be completed."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication failed"


class InvalidCredentialsError(AuthenticationError):
    """Unknown username or wrong password."""

    default_message = "Invalid credentials"


class RegistrationError(AppError):
    """The user record could not be created."""

    default_message = "Registration failed"


class AuthorizationError(AppError):
    """No bearer token was presented on a protected route."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class InvalidTokenError(AuthorizationError):
    """A bearer token was presented but is not acceptable.

    The client only ever sees "Forbidden"; ``reason`` is kept for logs.
    """

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"

    def __init__(self, reason: str = "invalid token"):
        super().__init__()
        self.reason = reason


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class StoreError(AppError):
    """The persistence layer raised. Details stay in the logs."""

    default_message = "Server error"
