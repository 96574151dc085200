"""Auth API schemas (login)."""

from pydantic import BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    """Request body for POST /users/login.

    email is normalized exactly as on user creation so lookups match the stored value.
    """

    email: EmailStr
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """Response for successful login."""

    token: str
