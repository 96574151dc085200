"""Settings validation tests."""

import pytest
from pydantic import ValidationError

from app.core.config import INSECURE_DEFAULT_SECRET_KEY, Settings


def _settings(**overrides) -> Settings:
    values = {"database_url": "sqlite+aiosqlite://", "secret_key": "k" * 32}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def test_database_url_built_from_parts() -> None:
    settings = _settings(
        database_url="",
        db_host="db.internal",
        db_port=5433,
        db_username="svc",
        db_password="pw",
        db_name="users",
    )
    assert settings.database_url == "postgresql+asyncpg://svc:pw@db.internal:5433/users"


def test_explicit_database_url_wins() -> None:
    settings = _settings(database_url="postgresql+asyncpg://a:b@h/d", db_host="ignored")
    assert settings.database_url == "postgresql+asyncpg://a:b@h/d"


def test_token_lifetime_defaults_to_one_hour() -> None:
    assert _settings().access_token_expire_minutes == 60


@pytest.mark.parametrize("rounds", [3, 32])
def test_bcrypt_rounds_out_of_range_rejected(rounds: int) -> None:
    with pytest.raises(ValidationError):
        _settings(bcrypt_rounds=rounds)


def test_hash_concurrency_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        _settings(password_hash_concurrency=0)


def test_insecure_key_flagged_outside_production() -> None:
    settings = _settings(secret_key=INSECURE_DEFAULT_SECRET_KEY)
    assert settings.uses_insecure_secret_key is True


def test_insecure_key_rejected_in_production() -> None:
    with pytest.raises(ValidationError, match="SECRET_KEY"):
        _settings(environment="production", secret_key=INSECURE_DEFAULT_SECRET_KEY)


def test_real_key_accepted_in_production() -> None:
    settings = _settings(environment="production")
    assert settings.uses_insecure_secret_key is False
