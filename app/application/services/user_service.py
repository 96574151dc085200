"""User application service: CRUD and login for the users resource.

Each operation is one lookup and at most one write. Failures surface as
domain exceptions (UserNotFoundException, InvalidCredentialsException,
DuplicateEmailException, StoreUnavailableException); anything else
propagates unchanged to the exception handlers.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from app.application.dtos.user import UserCreate, UserResult
from app.application.interfaces.repositories import IUserRecord, IUserRepository
from app.application.interfaces.services import IAuthSecurity
from app.domain.exceptions import (
    InvalidCredentialsException,
    InvalidTokenException,
    UserNotFoundException,
)
from app.shared.utils.datetime import ensure_utc

logger = logging.getLogger(__name__)


def _user_to_result(u: IUserRecord) -> UserResult:
    """Map stored user to UserResult (no password)."""
    return UserResult(
        id=u.id,
        first_name=u.first_name,
        last_name=u.last_name,
        email=u.email,
        created_at=ensure_utc(u.created_at),
        updated_at=ensure_utc(u.updated_at),
    )


class UserService:
    """List, get, create, update, delete users; log in with email and password."""

    def __init__(self, user_repo: IUserRepository, auth_security: IAuthSecurity) -> None:
        self._user_repo = user_repo
        self._auth_security = auth_security

    async def _get_or_raise(self, user_id: str) -> IUserRecord:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundException(user_id)
        return user

    async def list_users(self) -> list[UserResult]:
        users = await self._user_repo.find_all()
        return [_user_to_result(u) for u in users]

    async def get_user(self, user_id: str) -> UserResult:
        """Return user by id. Raises UserNotFoundException if absent."""
        return _user_to_result(await self._get_or_raise(user_id))

    async def create_user(self, data: UserCreate) -> UserResult:
        """Hash the password (when given) and insert the user.

        Raises DuplicateEmailException if the email is taken.
        """
        password_hash = await self._auth_security.hash_password(data.password)
        user = await self._user_repo.create_user(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            password_hash=password_hash,
        )
        logger.info("Created user %s", user.id)
        return _user_to_result(user)

    async def update_user(self, user_id: str, patch: Mapping[str, Any]) -> UserResult:
        """Apply a partial update: only keys present in patch change.

        A plaintext "password" key is hashed before the merge; an empty one
        leaves the stored hash untouched. A raw "password_hash" key is dropped.
        """
        user = await self._get_or_raise(user_id)
        changes = {k: v for k, v in patch.items() if k != "password_hash"}
        if "password" in changes:
            password_hash = await self._auth_security.hash_password(changes.pop("password"))
            if password_hash is not None:
                changes["password_hash"] = password_hash
        updated = await self._user_repo.merge_and_save(user, changes)
        logger.info("Updated user %s (fields: %s)", user_id, ", ".join(sorted(changes)))
        return _user_to_result(updated)

    async def delete_user(self, user_id: str) -> None:
        """Permanently delete user. Raises UserNotFoundException if absent."""
        user = await self._get_or_raise(user_id)
        await self._user_repo.delete(user)
        logger.info("Deleted user %s", user_id)

    async def login(self, email: str, password: str) -> str:
        """Return a bearer token for valid credentials.

        Unknown email and wrong password raise the same InvalidCredentialsException;
        the unknown-email path still runs a bcrypt comparison so both take similar time.
        """
        user = await self._user_repo.find_by_email(email)
        stored_hash = user.password_hash if user is not None else None
        verified = await self._auth_security.verify_password(password, stored_hash)
        if user is None or not verified:
            logger.info("Login failed")
            raise InvalidCredentialsException()
        logger.info("Login succeeded for user %s", user.id)
        return self._auth_security.create_access_token(user.id)

    async def get_current_user(self, token: str) -> UserResult:
        """Resolve the user named by a bearer token.

        Raises TokenExpiredException or InvalidTokenException; a token for a
        deleted user is treated as invalid.
        """
        payload = self._auth_security.verify_token(token)
        user = await self._user_repo.find_by_id(str(payload["sub"]))
        if user is None:
            raise InvalidTokenException()
        return _user_to_result(user)
