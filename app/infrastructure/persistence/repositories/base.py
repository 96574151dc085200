"""Base repository: generic CRUD with store-failure translation."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Generic, TypeVar

from sqlalchemy import inspect as sa_inspect, select
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.exceptions import StoreUnavailableException
from app.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


@contextmanager
def store_errors() -> Iterator[None]:
    """Translate connection/transport failures into StoreUnavailableException.

    Only the exception class name is kept as the reason; driver messages can
    carry hostnames or credentials.
    """
    try:
        yield
    except (OperationalError, InterfaceError, OSError) as e:
        raise StoreUnavailableException(type(e).__name__) from e


class BaseRepository(Generic[ModelType]):
    """Base repository with get_by_id, get_all, create, update, delete.

    Every database round trip runs inside store_errors(). Writes flush so
    constraint violations surface inside the repository call rather than
    at commit.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_by_id(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        with store_errors():
            result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def get_all(self, *order_by: Any) -> list[ModelType]:
        """Return all records, in the given order."""
        with store_errors():
            result = await self.db.execute(select(self.model).order_by(*order_by))
        return list(result.scalars().all())

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record and reload server-generated columns."""
        with store_errors():
            self.db.add(obj)
            await self.db.flush()
            await self.db.refresh(obj)
        return obj

    async def update(self, obj: ModelType) -> ModelType:
        """Flush pending changes on an attached record and reload it.

        Raises ValueError if the primary key is missing.
        """
        mapper = sa_inspect(self.model)
        for col in mapper.primary_key:
            if getattr(obj, col.key) is None:
                raise ValueError(
                    f"Cannot update: primary key '{col.key}' is missing on "
                    f"{self.model.__name__} instance."
                )
        with store_errors():
            obj = await self.db.merge(obj)
            await self.db.flush()
            await self.db.refresh(obj)
        return obj

    async def delete(self, obj: ModelType) -> None:
        """Delete the record."""
        with store_errors():
            await self.db.delete(obj)
            await self.db.flush()
