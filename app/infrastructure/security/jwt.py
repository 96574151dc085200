"""JWT token creation and verification for authentication.

Uses app.core.config for secret, algorithm, and lifetime; app.shared.utils for UTC time.
"""

from datetime import timedelta
from typing import Any, cast

from jose import ExpiredSignatureError, JWTError, jwt

from app.core.config import get_settings
from app.domain.exceptions import InvalidTokenException, TokenExpiredException
from app.shared.utils.datetime import utc_now


def create_access_token(
    user_id: str,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed bearer token for user_id.

    Args:
        user_id: Identifier stored in the sub and userId claims.
        expires_delta: Optional TTL; else uses settings.access_token_expire_minutes.

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    issued_at = utc_now()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    claims: dict[str, Any] = {
        "sub": user_id,
        "userId": user_id,
        "iat": issued_at,
        "exp": issued_at + expires_delta,
    }
    encoded = jwt.encode(
        claims,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def verify_token(token: str) -> dict[str, Any]:
    """Verify and decode a JWT. Returns the payload.

    Enforces presence of exp and sub.

    Args:
        token: JWT string (e.g. from Authorization header).

    Returns:
        Decoded payload dict.

    Raises:
        TokenExpiredException: If the exp claim is in the past.
        InvalidTokenException: If the token is malformed, mis-signed, or missing claims.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except ExpiredSignatureError as e:
        raise TokenExpiredException() from e
    except JWTError as e:
        raise InvalidTokenException() from e
    if not payload.get("sub"):
        raise InvalidTokenException("Token missing required claim: sub")
    return payload
