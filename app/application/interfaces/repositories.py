"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
No infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Protocol


class IUserRecord(Protocol):
    """Stored user as seen by the application layer (includes the password hash)."""

    id: str
    first_name: str
    last_name: str
    email: str
    password_hash: str | None
    created_at: datetime
    updated_at: datetime


# User repository interface
class IUserRepository(Protocol):
    """Protocol for user persistence (DIP).

    Every method may raise StoreUnavailableException when the database is unreachable.
    """

    async def find_all(self) -> list[IUserRecord]:
        """Return every user ordered by created_at (oldest first)."""

    async def find_by_id(self, user_id: str) -> IUserRecord | None:
        """Return user by id, or None."""

    async def find_by_email(self, email: str) -> IUserRecord | None:
        """Return user by email, or None."""

    async def create_user(
        self,
        first_name: str,
        last_name: str,
        email: str,
        password_hash: str | None = None,
    ) -> IUserRecord:
        """Insert a user. Raises DuplicateEmailException on duplicate email."""

    async def merge_and_save(
        self, user: IUserRecord, patch: Mapping[str, Any]
    ) -> IUserRecord:
        """Overlay present patch keys onto user and persist; never touches id or created_at."""

    async def delete(self, user: IUserRecord) -> None:
        """Permanently remove the user."""
