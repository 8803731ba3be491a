"""
Access token primitives.

Issues and verifies signed JWT access tokens. The token subject is the
numeric user id, so identity is resolved server-side instead of trusting a
client-supplied username.

Dependencies: python-jose, backend.configs
System role: Request identity verification
"""

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from backend.configs.auth import AuthSettings
from backend.core.exceptions import AuthenticationError


def create_access_token(
    user_id: int,
    settings: AuthSettings,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a signed access token for a user.

    Args:
        user_id: Numeric user id stored in the ``sub`` claim
        settings: Auth settings (secret, algorithm, default lifetime)
        expires_delta: Optional lifetime override

    Returns:
        str: Encoded JWT
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    claims = {"sub": str(user_id), "iat": now, "exp": expire}
    return jwt.encode(claims, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str, settings: AuthSettings) -> int:
    """
    Verify an access token and return its user id.

    Args:
        token: Encoded JWT
        settings: Auth settings used to sign the token

    Returns:
        int: User id from the ``sub`` claim

    Raises:
        AuthenticationError: Signature, expiry or subject is invalid
    """
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as e:
        raise AuthenticationError("Invalid or expired access token") from e

    subject = payload.get("sub")
    if subject is None or not str(subject).isdigit():
        raise AuthenticationError("Access token has no valid subject")
    return int(subject)
