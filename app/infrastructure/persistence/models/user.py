"""User ORM model: attribute-to-column mapping for the users table."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import TimestampMixin, UuidMixin


class User(UuidMixin, TimestampMixin, Base):
    """User model. Table: users. Email is unique across all users.

    password_hash maps to the "password" column and holds a bcrypt hash, or
    NULL for users created without a password.
    """

    __tablename__ = "users"

    first_name: Mapped[str] = mapped_column("firstName", String(100), nullable=False)
    last_name: Mapped[str] = mapped_column("lastName", String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password_hash: Mapped[str | None] = mapped_column(
        "password", String(255), nullable=True
    )

    def __repr__(self) -> str:
        return f"<User id={self.id!r} email={self.email!r}>"
