"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services (DIP).
"""

from __future__ import annotations

from typing import Any, Protocol


# Password hashing and token signing
class IAuthSecurity(Protocol):
    """Protocol for credential hashing and bearer token handling."""

    async def hash_password(self, password: str | None) -> str | None:
        """Return a salted hash, or None when password is empty or absent."""

    async def verify_password(self, password: str, hashed: str | None) -> bool:
        """Return True iff password matches hashed. Never raises on a bad hash."""

    def create_access_token(self, user_id: str) -> str:
        """Sign a time-bound token for user_id."""

    def verify_token(self, token: str) -> dict[str, Any]:
        """Decode a token; raise TokenExpiredException or InvalidTokenException."""
