"""
Task API - Authentication Schemas

Pydantic models for authentication requests and responses.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserRegisterRequest(BaseModel):
    """Request schema for user registration.

    Fields are optional here; the service rejects missing values with a
    RegistrationError so every refusal surfaces as 500.
    """

    username: Optional[str] = None
    password: Optional[str] = None


class UserLoginRequest(BaseModel):
    """Request schema for user login.

    Missing values reach the service and fail as invalid credentials (401).
    """

    username: Optional[str] = None
    password: Optional[str] = None


class RegisterResponse(BaseModel):
    """Response schema for a created user."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId")


class TokenResponse(BaseModel):
    """Response schema for successful authentication."""

    token: str
