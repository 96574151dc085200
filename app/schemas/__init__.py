"""API request/response schemas (Pydantic)."""

from app.schemas.auth import LoginRequest, TokenResponse
from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)
from app.schemas.user import UserCreateRequest, UserResponse, UserUpdateRequest

__all__ = [
    "HealthResponse",
    "LoginRequest",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "TokenResponse",
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateRequest",
]
