"""Domain layer: exceptions shared by application and infrastructure.

No dependencies on infrastructure or presentation.
"""

from app.domain.exceptions import (
    AuthenticationException,
    DuplicateEmailException,
    InvalidCredentialsException,
    InvalidTokenException,
    ResourceNotFoundException,
    StoreUnavailableException,
    TokenExpiredException,
    UserManagementException,
    UserNotFoundException,
)

__all__ = [
    "AuthenticationException",
    "DuplicateEmailException",
    "InvalidCredentialsException",
    "InvalidTokenException",
    "ResourceNotFoundException",
    "StoreUnavailableException",
    "TokenExpiredException",
    "UserManagementException",
    "UserNotFoundException",
]
