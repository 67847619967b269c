"""JWT token creation and verification for session tokens.

The signing key is always passed in by the caller (the Authenticator holds it);
nothing here reads process-wide settings.
"""

from datetime import datetime, timedelta
from typing import Any, cast

from jose import ExpiredSignatureError, JWTError, jwt

from contact_manager.domain.exceptions import AuthenticationException
from contact_manager.shared.utils.datetime import to_unix_timestamp, utc_now

REQUIRED_CLAIMS = ("user_id", "exp")


def create_access_token(
    data: dict[str, Any],
    secret_key: str,
    *,
    algorithm: str = "HS256",
    expires_at: datetime | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed JWT with the given claims plus exp.

    Args:
        data: Claims to encode (e.g. user_id, username, access).
        secret_key: HMAC signing key.
        algorithm: JWS algorithm (default HS256).
        expires_at: Absolute expiry; takes precedence over expires_delta.
        expires_delta: TTL from now when expires_at is not given (default 24h).

    Returns:
        Encoded JWT string.
    """
    to_encode = data.copy()
    if expires_at is None:
        expires_at = utc_now() + (expires_delta or timedelta(hours=24))
    to_encode["exp"] = to_unix_timestamp(expires_at)
    encoded = jwt.encode(to_encode, secret_key, algorithm=algorithm)
    return cast(str, encoded)


def verify_token(
    token: str, secret_key: str, *, algorithm: str = "HS256"
) -> dict[str, Any]:
    """Verify and decode a JWT. Returns the payload.

    Enforces signature, exp, and presence of user_id.

    Raises:
        AuthenticationException: If token is invalid, expired, or missing claims.
    """
    try:
        payload = jwt.decode(
            token,
            secret_key,
            algorithms=[algorithm],
            options={"require_exp": True},
        )
    except ExpiredSignatureError as e:
        raise AuthenticationException("Token has expired") from e
    except JWTError as e:
        raise AuthenticationException(f"Invalid token: {e!s}") from e
    for claim in REQUIRED_CLAIMS:
        if claim not in payload:
            raise AuthenticationException(f"Token missing required claim: {claim}")
    return payload
