"""DTOs for user use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserCreate:
    """Input for creating a user. password is plaintext and optional."""

    first_name: str
    last_name: str
    email: str
    password: str | None = None


@dataclass(frozen=True)
class UserResult:
    """User read-model (result of get_user, create_user, etc.). No password."""

    id: str
    first_name: str
    last_name: str
    email: str
    created_at: datetime
    updated_at: datetime
