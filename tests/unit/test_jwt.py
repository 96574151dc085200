"""Tests for bearer token creation and verification."""

from datetime import timedelta

import pytest
from jose import jwt

from app.core.config import get_settings
from app.domain.exceptions import (
    InvalidTokenException,
    TokenExpiredException,
    UserNotFoundException,
)
from app.infrastructure.security.jwt import create_access_token, verify_token
from app.shared.utils.datetime import utc_now


def test_token_carries_user_id() -> None:
    token = create_access_token("user-1")
    payload = verify_token(token)
    assert payload["sub"] == "user-1"
    assert payload["userId"] == "user-1"


def test_token_expires_one_hour_after_issue() -> None:
    token = create_access_token("user-1")
    payload = verify_token(token)
    assert payload["exp"] - payload["iat"] == 3600


def test_expired_token_raises_token_expired() -> None:
    token = create_access_token("user-1", expires_delta=timedelta(seconds=-10))
    with pytest.raises(TokenExpiredException) as exc_info:
        verify_token(token)
    assert exc_info.value.error_code == "TOKEN_EXPIRED"


def test_token_signed_with_other_key_is_rejected() -> None:
    now = utc_now()
    forged = jwt.encode(
        {"sub": "user-1", "exp": now + timedelta(hours=1)},
        "some-other-key",
        algorithm=get_settings().algorithm,
    )
    with pytest.raises(InvalidTokenException):
        verify_token(forged)


def test_garbage_token_is_rejected() -> None:
    with pytest.raises(InvalidTokenException):
        verify_token("not.a.token")


def test_token_without_sub_is_rejected() -> None:
    settings = get_settings()
    token = jwt.encode(
        {"exp": utc_now() + timedelta(hours=1)},
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    with pytest.raises(InvalidTokenException):
        verify_token(token)


def test_token_errors_are_distinct_from_user_not_found() -> None:
    assert not issubclass(InvalidTokenException, UserNotFoundException)
    assert not issubclass(TokenExpiredException, UserNotFoundException)
