# --- File: firmness/schemas/auth.py ---
"""
Authentication schemas.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import ConfigDict, EmailStr, Field

from .base import BaseSchema

__all__ = ["RegisterRequest", "LoginRequest", "TokenResponse", "UserRead"]


class RegisterRequest(BaseSchema):
    # Passwords are taken verbatim
    model_config = ConfigDict(str_strip_whitespace=False)

    email: EmailStr
    password: str = Field(..., min_length=6, max_length=64)
    full_name: Optional[str] = Field(default=None, max_length=200)


class LoginRequest(BaseSchema):
    model_config = ConfigDict(str_strip_whitespace=False)

    email: EmailStr
    password: str = Field(..., min_length=1)


class TokenResponse(BaseSchema):
    access_token: str
    token_type: str = "bearer"
    expires_in: int


class UserRead(BaseSchema):
    id: str
    email: str
    full_name: Optional[str] = None
    roles: List[str] = Field(default_factory=list)
