"""
Authentication request/response schemas.
"""
from typing import Optional

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """
    Login request body.

    Both fields are optional here so the handler can answer missing and
    empty values with the same message.
    """
    username: Optional[str] = Field(None, description="Username")
    password: Optional[str] = Field(None, description="User password")


class LoginUser(BaseModel):
    """User info returned on successful login."""
    id: str = Field(..., description="User ID")
    username: str = Field(..., description="Username")


class LoginResult(BaseModel):
    """Outcome of a successful login."""
    access_token: str = Field(..., description="JWT access token")
    user: LoginUser


class TokenIdentity(BaseModel):
    """Identity decoded from a verified bearer token."""
    user_id: str = Field(..., description="Subject (user ID)")
    username: Optional[str] = Field(None, description="Username claim")
