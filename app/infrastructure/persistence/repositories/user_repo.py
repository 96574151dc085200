"""User repository: lookups, create, merge-and-save, delete on the users table."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.exceptions import DuplicateEmailException
from app.infrastructure.persistence.models.user import User
from app.infrastructure.persistence.repositories.base import (
    BaseRepository,
    store_errors,
)
from app.shared.utils.datetime import utc_now

# Attributes a patch may overwrite. id, created_at and updated_at are never merged.
_MERGEABLE_FIELDS: frozenset[str] = frozenset(
    {"first_name", "last_name", "email", "password_hash"}
)
_NULLABLE_FIELDS: frozenset[str] = frozenset({"password_hash"})


class UserRepository(BaseRepository[User]):
    """User repository. Email uniqueness violations raise DuplicateEmailException."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def find_all(self) -> list[User]:
        """Return every user, oldest first; equal createdAt values are ordered by id."""
        return await self.get_all(User.created_at.asc(), User.id.asc())

    async def find_by_id(self, user_id: str) -> User | None:
        return await self.get_by_id(user_id)

    async def find_by_email(self, email: str) -> User | None:
        with store_errors():
            result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def create_user(
        self,
        first_name: str,
        last_name: str,
        email: str,
        password_hash: str | None = None,
    ) -> User:
        """Insert a user; id and timestamps are assigned here.

        Raises:
            DuplicateEmailException: If the email is already registered.
        """
        user = User(
            first_name=first_name,
            last_name=last_name,
            email=email,
            password_hash=password_hash,
        )
        try:
            return await self.create(user)
        except IntegrityError:
            raise DuplicateEmailException() from None

    async def merge_and_save(self, user: User, patch: Mapping[str, Any]) -> User:
        """Overlay patch onto user, refresh updated_at, and persist.

        Only keys present in patch overwrite. Unknown keys, protected keys
        (id, created_at, updated_at) and None for non-nullable fields are
        ignored.

        Raises:
            DuplicateEmailException: If the new email is already registered.
        """
        for key, value in patch.items():
            if key not in _MERGEABLE_FIELDS:
                continue
            if value is None and key not in _NULLABLE_FIELDS:
                continue
            setattr(user, key, value)
        user.updated_at = utc_now()
        try:
            return await self.update(user)
        except IntegrityError:
            raise DuplicateEmailException() from None
