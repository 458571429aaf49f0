"""
Authentication dependencies.

Resolves the calling user from the session token, read from the
``Authorization: Bearer`` header or the session cookie.

Dependencies: fastapi, quest_api.core.security
System role: Request authentication for protected routes
"""

import logging

from fastapi import HTTPException, Request, Response, status
from fastapi.security.utils import get_authorization_scheme_param

from quest_api.configs import get_settings
from quest_api.core.exceptions import AuthenticationError
from quest_api.core.security import create_access_token, decode_access_token

logger = logging.getLogger(__name__)


def _extract_token(request: Request) -> str | None:
    scheme, credentials = get_authorization_scheme_param(
        request.headers.get("Authorization")
    )
    if scheme.lower() == "bearer" and credentials:
        return credentials
    return request.cookies.get(get_settings().auth.cookie_name)


async def get_current_user_id(request: Request) -> str:
    """
    FastAPI dependency returning the authenticated user ID.

    Raises:
        HTTPException(401): If no token is sent or it does not verify
    """
    token = _extract_token(request)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        claims = decode_access_token(token)
    except AuthenticationError as e:
        logger.warning("Rejected session token", extra={"error": str(e)})
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    return claims["user_id"]


def set_session_cookie(response: Response, user_id: str) -> str:
    """
    Issue a session token and attach it as a cookie.

    Args:
        response: Outgoing response
        user_id: Authenticated user

    Returns:
        str: The issued token
    """
    auth = get_settings().auth
    token = create_access_token(user_id)
    response.set_cookie(
        key=auth.cookie_name,
        value=token,
        max_age=auth.expire_hours * 3600,
        path="/",
        secure=auth.cookie_secure,
        httponly=True,
        samesite="lax",
    )
    return token
