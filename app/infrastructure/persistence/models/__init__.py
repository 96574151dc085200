"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.mixins import TimestampMixin, UuidMixin
from app.infrastructure.persistence.models.user import User

__all__ = [
    "TimestampMixin",
    "User",
    "UuidMixin",
]
