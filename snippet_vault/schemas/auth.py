"""Authentication schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserRegister(BaseModel):
    """User registration request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=8, max_length=128)
    name: str | None = Field(None, max_length=255)


class UserLogin(BaseModel):
    """User login request.

    No length rules on the password here: a short wrong password must get the
    same 401 as any other wrong password.
    """

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., max_length=128)


class Principal(BaseModel):
    """An authenticated user, without the password digest."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    email: str
    name: str | None
    created_at: datetime


class AuthResponse(BaseModel):
    """Authentication response with token and user info."""

    access_token: str
    token_type: str = "bearer"  # noqa: S105
    user: Principal
