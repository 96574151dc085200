"""Domain exceptions for the user management service.

Defines domain-level exceptions that represent business rule violations
and store failures. These exceptions are independent of HTTP; the
presentation layer maps them to responses in app.core.exception_handlers.
"""

from typing import Any


class UserManagementException(Exception):
    """Base exception for all application errors.

    All custom exceptions inherit from this class so they can be mapped
    to HTTP responses in one place using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body: error (message), code, and details when present."""
        body: dict[str, Any] = {"error": self.message, "code": self.error_code}
        if self.details:
            body["details"] = self.details
        return body


class ResourceNotFoundException(UserManagementException):
    """Raised when a requested resource is not found."""

    def __init__(
        self, resource_type: str, resource_id: str, message: str | None = None
    ) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'user').
            resource_id: The ID that was not found.
            message: Optional message; defaults to '<resource_type> not found: <id>'.
        """
        super().__init__(
            message or f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class UserNotFoundException(ResourceNotFoundException):
    """Raised when no user exists for the given id. Carries no details; the id is on user_id."""

    def __init__(self, user_id: str) -> None:
        super().__init__("user", user_id, message="User not found")
        self.user_id = user_id
        self.details = {}


class AuthenticationException(UserManagementException):
    """Raised when authentication fails (e.g. invalid credentials or token)."""

    def __init__(
        self, message: str = "Authentication failed", error_code: str = "AUTHENTICATION_ERROR"
    ) -> None:
        super().__init__(message, error_code)


class InvalidCredentialsException(AuthenticationException):
    """Raised on login failure.

    Same message and code whether the email is unknown or the password is
    wrong, so callers cannot enumerate accounts.
    """

    def __init__(self) -> None:
        super().__init__("Invalid credentials", "INVALID_CREDENTIALS")


class InvalidTokenException(AuthenticationException):
    """Raised when a bearer token is missing, malformed, mis-signed, or names an unknown user."""

    def __init__(self, message: str = "Invalid token") -> None:
        super().__init__(message, "INVALID_TOKEN")


class TokenExpiredException(AuthenticationException):
    """Raised when a bearer token's exp claim is in the past."""

    def __init__(self) -> None:
        super().__init__("Token has expired", "TOKEN_EXPIRED")


class DuplicateEmailException(UserManagementException):
    """Raised when creating or updating a user to an email that is already registered."""

    def __init__(self) -> None:
        super().__init__(
            "Email is already registered",
            "DUPLICATE_EMAIL",
            {"field": "email"},
        )


class StoreUnavailableException(UserManagementException):
    """Raised when the database cannot be reached (connection or transport failure)."""

    def __init__(self, reason: str | None = None) -> None:
        super().__init__(
            message="The user store is unavailable",
            error_code="STORE_UNAVAILABLE",
            details={"reason": reason} if reason else None,
        )
