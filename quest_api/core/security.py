"""
Session token and password hashing utilities.

Issues and verifies HS256 session tokens carrying the user id, and
hashes passwords before they reach storage.

Dependencies: python-jose, passlib, quest_api.configs
System role: Authentication primitives for the API layer
"""

from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from quest_api.configs import get_settings
from quest_api.core.exceptions import AuthenticationError

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    """Return the salted hash stored in place of a plain password."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain password against its stored hash."""
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(user_id: str, expires_delta: timedelta | None = None) -> str:
    """
    Create a signed session token for a user.

    Args:
        user_id: Subject of the token
        expires_delta: Lifetime override (defaults to the configured hours)

    Returns:
        str: Encoded JWT with user_id, iat and exp claims
    """
    auth = get_settings().auth
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(hours=auth.expire_hours))
    claims = {
        "user_id": user_id,
        "iat": int(now.timestamp()),
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(claims, auth.secret_key, algorithm=auth.algorithm)


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and verify a session token.

    Args:
        token: Encoded JWT

    Returns:
        dict: Verified claims

    Raises:
        AuthenticationError: If the signature, expiry or claims are invalid
    """
    auth = get_settings().auth
    try:
        claims = jwt.decode(token, auth.secret_key, algorithms=[auth.algorithm])
    except JWTError as e:
        raise AuthenticationError("Invalid session token", {"reason": str(e)}) from e

    if not claims.get("user_id"):
        raise AuthenticationError("Session token has no user_id claim")
    return claims
