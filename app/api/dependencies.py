"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, auth security, and the user
service. The Database handle and AuthSecurity are created once in the
application lifespan and read from app.state here; routes depend only on
these dependencies, not on infrastructure directly.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Callable
from typing import Annotated, Any, TypeVar

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.user import UserResult
from app.application.services.user_service import UserService
from app.core.config import Settings
from app.domain.exceptions import InvalidTokenException
from app.infrastructure.persistence.database import Database
from app.infrastructure.persistence.repositories import UserRepository
from app.infrastructure.security.jwt import create_access_token, verify_token
from app.infrastructure.security.password import (
    get_password_hash,
    hash_password_if_present,
    verify_password,
)

_bearer = HTTPBearer(auto_error=False)

T = TypeVar("T")


class AuthSecurity:
    """Token signing and password hashing provided via DI.

    bcrypt runs in worker threads (asyncio.to_thread) so it never blocks the
    event loop; a semaphore caps how many hashes run at once.
    """

    def __init__(self, settings: Settings) -> None:
        self._rounds = settings.bcrypt_rounds
        self._hash_slots = asyncio.Semaphore(settings.password_hash_concurrency)
        self._dummy_hash: str | None = None

    async def _off_loop(self, func: Callable[..., T], *args: Any) -> T:
        async with self._hash_slots:
            return await asyncio.to_thread(func, *args)

    async def _get_dummy_hash(self) -> str:
        """Valid hash for comparisons when no user or no stored hash exists (timing-attack mitigation)."""
        if self._dummy_hash is None:
            self._dummy_hash = await self._off_loop(
                get_password_hash, "not-a-real-password", self._rounds
            )
        return self._dummy_hash

    async def hash_password(self, password: str | None) -> str | None:
        return await self._off_loop(hash_password_if_present, password, self._rounds)

    async def verify_password(self, password: str, hashed: str | None) -> bool:
        if not hashed:
            await self._off_loop(verify_password, password, await self._get_dummy_hash())
            return False
        return await self._off_loop(verify_password, password, hashed)

    def create_access_token(self, user_id: str) -> str:
        return create_access_token(user_id)

    def verify_token(self, token: str) -> dict[str, Any]:
        return verify_token(token)


def get_database(request: Request) -> Database:
    """Process-scoped Database created by the lifespan."""
    return request.app.state.database


def get_auth_security(request: Request) -> AuthSecurity:
    """Process-scoped AuthSecurity created by the lifespan."""
    return request.app.state.auth_security


async def get_db(
    database: Annotated[Database, Depends(get_database)],
) -> AsyncIterator[AsyncSession]:
    """Database session dependency for read operations. Does not commit."""
    async with database.session() as session:
        yield session


async def get_db_transactional(
    database: Annotated[Database, Depends(get_database)],
) -> AsyncIterator[AsyncSession]:
    """Database session dependency for write operations.

    Begins a transaction, commits on success, rolls back on exception.
    Use for POST, PUT, PATCH, DELETE endpoints.
    """
    async with database.transaction() as session:
        yield session


async def get_user_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    auth_security: Annotated[AuthSecurity, Depends(get_auth_security)],
) -> UserService:
    """UserService on a read session."""
    return UserService(UserRepository(db), auth_security)


async def get_user_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    auth_security: Annotated[AuthSecurity, Depends(get_auth_security)],
) -> UserService:
    """UserService on a transactional session (writes)."""
    return UserService(UserRepository(db), auth_security)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_bearer)],
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> UserResult:
    """Resolve the user from Authorization: Bearer <token>.

    Raises InvalidTokenException (401) when the header is missing or the
    token is invalid, TokenExpiredException (401) when it has expired.
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise InvalidTokenException("Missing bearer token")
    return await user_service.get_current_user(credentials.credentials)
