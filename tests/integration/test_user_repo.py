"""User repository integration tests against the configured test database.

Each step runs in its own transaction, the way request handlers use the store.
"""

import pytest

from app.core.config import Settings
from app.domain.exceptions import DuplicateEmailException, StoreUnavailableException
from app.infrastructure.persistence.database import Database
from app.infrastructure.persistence.repositories import UserRepository
from app.shared.utils.datetime import ensure_utc, utc_now


async def _create(database: Database, email: str = "john@example.com", **kwargs):
    async with database.transaction() as session:
        return await UserRepository(session).create_user(
            first_name=kwargs.get("first_name", "John"),
            last_name=kwargs.get("last_name", "Doe"),
            email=email,
            password_hash=kwargs.get("password_hash"),
        )


@pytest.mark.requires_db
async def test_create_assigns_id_and_timestamps(database: Database) -> None:
    before = utc_now().replace(microsecond=0)
    user = await _create(database, password_hash="$2b$04$hash")
    assert len(user.id) == 36
    assert ensure_utc(user.created_at) >= before
    assert ensure_utc(user.updated_at) >= before
    assert user.password_hash == "$2b$04$hash"


@pytest.mark.requires_db
async def test_find_by_id_and_email(database: Database) -> None:
    created = await _create(database)
    async with database.session() as session:
        repo = UserRepository(session)
        by_id = await repo.find_by_id(created.id)
        by_email = await repo.find_by_email("john@example.com")
        assert await repo.find_by_id("missing") is None
        assert await repo.find_by_email("nobody@example.com") is None
    assert by_id is not None and by_id.email == "john@example.com"
    assert by_email is not None and by_email.id == created.id


@pytest.mark.requires_db
async def test_find_all_oldest_first(database: Database) -> None:
    first = await _create(database, "a@example.com")
    second = await _create(database, "b@example.com")
    async with database.session() as session:
        users = await UserRepository(session).find_all()
    assert [u.id for u in users] == [first.id, second.id]


@pytest.mark.requires_db
async def test_find_all_empty(database: Database) -> None:
    async with database.session() as session:
        assert await UserRepository(session).find_all() == []


@pytest.mark.requires_db
async def test_duplicate_email_on_create(database: Database) -> None:
    await _create(database)
    with pytest.raises(DuplicateEmailException):
        await _create(database, first_name="Other")
    async with database.session() as session:
        assert len(await UserRepository(session).find_all()) == 1


@pytest.mark.requires_db
async def test_merge_and_save_overwrites_only_present_fields(database: Database) -> None:
    created = await _create(database, password_hash="$2b$04$hash")
    async with database.transaction() as session:
        repo = UserRepository(session)
        user = await repo.find_by_id(created.id)
        updated = await repo.merge_and_save(user, {"first_name": "Johnny"})
    assert updated.first_name == "Johnny"
    assert updated.last_name == "Doe"
    assert updated.email == "john@example.com"
    assert updated.password_hash == "$2b$04$hash"
    assert ensure_utc(updated.created_at) == ensure_utc(created.created_at)
    assert ensure_utc(updated.updated_at) > ensure_utc(created.updated_at)


@pytest.mark.requires_db
async def test_merge_and_save_ignores_protected_and_unknown_keys(database: Database) -> None:
    created = await _create(database)
    async with database.transaction() as session:
        repo = UserRepository(session)
        user = await repo.find_by_id(created.id)
        updated = await repo.merge_and_save(
            user,
            {
                "id": "hijacked",
                "created_at": utc_now().replace(year=2000),
                "nickname": "JD",
                "last_name": None,
            },
        )
    assert updated.id == created.id
    assert ensure_utc(updated.created_at) == ensure_utc(created.created_at)
    assert updated.last_name == "Doe"
    assert not hasattr(updated, "nickname")


@pytest.mark.requires_db
async def test_merge_and_save_duplicate_email(database: Database) -> None:
    await _create(database, "a@example.com")
    other = await _create(database, "b@example.com")
    with pytest.raises(DuplicateEmailException):
        async with database.transaction() as session:
            repo = UserRepository(session)
            user = await repo.find_by_id(other.id)
            await repo.merge_and_save(user, {"email": "a@example.com"})
    async with database.session() as session:
        unchanged = await UserRepository(session).find_by_id(other.id)
    assert unchanged.email == "b@example.com"


@pytest.mark.requires_db
async def test_delete(database: Database) -> None:
    created = await _create(database)
    async with database.transaction() as session:
        repo = UserRepository(session)
        await repo.delete(await repo.find_by_id(created.id))
    async with database.session() as session:
        assert await UserRepository(session).find_by_id(created.id) is None


async def test_unreachable_store_raises_store_unavailable() -> None:
    settings = Settings(
        _env_file=None,
        database_url="sqlite+aiosqlite:////nonexistent-dir-xyz/users.db",
        secret_key="k" * 32,
    )
    database = Database(settings)
    try:
        with pytest.raises(StoreUnavailableException) as exc_info:
            async with database.session() as session:
                await UserRepository(session).find_all()
        assert exc_info.value.details == {"reason": "OperationalError"}
    finally:
        await database.dispose()
