"""Pytest configuration and fixtures.

Environment is set before app.* is imported so get_settings() sees it.
Database tests run against in-memory SQLite (aiosqlite) unless
TEST_DATABASE_URL points elsewhere; tables come from ORM metadata.
"""

import os

os.environ["DATABASE_URL"] = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite://")
os.environ["SECRET_KEY"] = "test-secret-key-not-for-production"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ENVIRONMENT"] = "test"

from collections.abc import AsyncIterator  # noqa: E402

import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.core.config import get_settings  # noqa: E402

get_settings.cache_clear()

from app.infrastructure.persistence.database import Base, Database  # noqa: E402
from app.main import create_app  # noqa: E402

USER_PAYLOAD = {
    "firstName": "John",
    "lastName": "Doe",
    "email": "john@example.com",
    "password": "secret",
}


@pytest.fixture
async def app() -> AsyncIterator[FastAPI]:
    """FastAPI app with lifespan running and a fresh schema."""
    application = create_app()
    async with application.router.lifespan_context(application):
        database: Database = application.state.database
        await database.create_all()
        yield application
        async with database.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def database(app: FastAPI) -> Database:
    """The Database handle the app is using."""
    return app.state.database


@pytest.fixture
async def created_user(client: AsyncClient) -> dict:
    """POST the standard John Doe user and return the response body."""
    response = await client.post("/api/users", json=USER_PAYLOAD)
    assert response.status_code == 201, response.text
    return response.json()
