"""AuthSecurity: bcrypt off the event loop, token helpers."""

from app.api.dependencies import AuthSecurity
from app.core.config import get_settings
from app.infrastructure.security.password import get_password_hash


def _auth() -> AuthSecurity:
    return AuthSecurity(get_settings())


async def test_hash_and_verify_round_trip() -> None:
    auth = _auth()
    hashed = await auth.hash_password("secret")
    assert hashed is not None and hashed != "secret"
    assert await auth.verify_password("secret", hashed) is True
    assert await auth.verify_password("wrong", hashed) is False


async def test_hash_password_none_for_missing_password() -> None:
    auth = _auth()
    assert await auth.hash_password(None) is None
    assert await auth.hash_password("") is None


async def test_verify_without_stored_hash_is_false_and_caches_dummy() -> None:
    auth = _auth()
    assert await auth.verify_password("secret", None) is False
    dummy = auth._dummy_hash
    assert dummy is not None
    assert await auth.verify_password("secret", "") is False
    assert auth._dummy_hash == dummy


async def test_verify_accepts_hash_from_module_function() -> None:
    auth = _auth()
    assert await auth.verify_password("secret", get_password_hash("secret", rounds=4))


def test_token_helpers_round_trip() -> None:
    auth = _auth()
    payload = auth.verify_token(auth.create_access_token("u1"))
    assert payload["sub"] == "u1"
