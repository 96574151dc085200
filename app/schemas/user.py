"""User API schemas. JSON field names are camelCase."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

_camel = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserCreateRequest(BaseModel):
    """Request body for creating a user. password is optional."""

    model_config = _camel

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str | None = None


class UserUpdateRequest(BaseModel):
    """Request body for a partial update. Absent fields are left unchanged.

    Other keys (id, createdAt, ...) are ignored.
    """

    model_config = _camel

    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    email: EmailStr | None = None
    password: str | None = None


class UserResponse(BaseModel):
    """User response (no password)."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: str
    first_name: str
    last_name: str
    email: str
    created_at: datetime
    updated_at: datetime
