"""Application services (use cases)."""

from app.application.services.user_service import UserService

__all__ = ["UserService"]
