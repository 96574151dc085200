"""Application DTOs: use-case inputs and read-models."""

from app.application.dtos.user import UserCreate, UserResult

__all__ = ["UserCreate", "UserResult"]
