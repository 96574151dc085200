"""SQLAlchemy mixins for common model patterns.

Provides: UuidMixin and TimestampMixin. Column names are camelCase to match
the existing users table; attribute names stay snake_case.
"""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from app.shared.utils.datetime import utc_now
from app.shared.utils.generators import generate_uuid


class UuidMixin:
    """Mixin for models using a UUID string as primary key. Assigned once on insert."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String(36), primary_key=True, default=generate_uuid)


class TimestampMixin:
    """Mixin for createdAt and updatedAt (timezone-aware).

    Python-side defaults keep the values consistent across backends; server
    defaults cover rows written outside the ORM.
    """

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            "createdAt",
            DateTime(timezone=True),
            default=utc_now,
            server_default=func.now(),
            nullable=False,
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            "updatedAt",
            DateTime(timezone=True),
            default=utc_now,
            server_default=func.now(),
            onupdate=utc_now,
            nullable=False,
        )
