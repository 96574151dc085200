"""Application layer: DTOs, interfaces, and services.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (user repository, auth security).
"""

from app.application.interfaces import IAuthSecurity, IUserRecord, IUserRepository
from app.application.services.user_service import UserService

__all__ = [
    "IAuthSecurity",
    "IUserRecord",
    "IUserRepository",
    "UserService",
]
