"""
User and session API endpoints.

Routes:
- POST /register - Create account and start a session
- POST /login - Check credentials and start a session
- GET /users/{id} - Get own account with participated quests
- DELETE /users/{id} - Delete own account
- GET /user/auth - Get the account behind the current session

Dependencies: quest_api.application.services, quest_api.models
System role: Account management HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Response

from quest_api.api.deps.auth import get_current_user_id, set_session_cookie
from quest_api.api.deps.dependencies import get_user_service
from quest_api.application.services.user_service import UserService
from quest_api.configs import get_settings
from quest_api.core.exceptions import AuthorizationError
from quest_api.models.user import (
    LoginUserRequest,
    RegisterUserRequest,
    UserDetailResponse,
    UserResponse,
)

from .error_handling import handle_service_errors
from .responses import map_user_detail_to_response, map_user_to_response

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


def _ensure_self(user_id: str, current_user_id: str) -> None:
    if user_id != current_user_id:
        raise AuthorizationError(
            "Cannot access another user's account",
            {"user_id": user_id, "current_user_id": current_user_id},
        )


@router.post("/register", response_model=UserResponse, status_code=201)
@handle_service_errors
async def register(
    request: RegisterUserRequest,
    response: Response,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """
    Register a new user and set the session cookie.

    Raises:
        HTTPException(400): Username or email already taken
    """
    user = await user_service.register_user(
        username=request.username,
        email=request.email,
        password=request.password,
    )
    set_session_cookie(response, user["id"])
    return map_user_to_response(user)


@router.post("/login", response_model=UserDetailResponse)
@handle_service_errors
async def login(
    request: LoginUserRequest,
    response: Response,
    user_service: UserService = Depends(get_user_service),
) -> UserDetailResponse:
    """
    Log in, set the session cookie and return the user with participated quests.

    Raises:
        HTTPException(401): Wrong username or password
    """
    user = await user_service.authenticate(request.username, request.password)
    detail = await user_service.get_user(user["id"])
    set_session_cookie(response, user["id"])
    logger.info("User logged in", extra={"user_id": user["id"]})
    return map_user_detail_to_response(detail)


@router.get("/users/{user_id}", response_model=UserDetailResponse)
@handle_service_errors
async def get_user(
    user_id: str,
    current_user_id: str = Depends(get_current_user_id),
    user_service: UserService = Depends(get_user_service),
) -> UserDetailResponse:
    """
    Get own account with participated quests.

    Raises:
        HTTPException(403): Addressing another user
        HTTPException(404): User not found
    """
    _ensure_self(user_id, current_user_id)
    user = await user_service.get_user(user_id)
    return map_user_detail_to_response(user)


@router.delete("/users/{user_id}", status_code=204)
@handle_service_errors
async def delete_user(
    user_id: str,
    response: Response,
    current_user_id: str = Depends(get_current_user_id),
    user_service: UserService = Depends(get_user_service),
) -> None:
    """
    Delete own account and end the session.

    Raises:
        HTTPException(403): Addressing another user
        HTTPException(404): User not found
    """
    _ensure_self(user_id, current_user_id)
    await user_service.delete_user(user_id)
    response.delete_cookie(get_settings().auth.cookie_name, path="/")


@router.get("/user/auth", response_model=UserDetailResponse)
@handle_service_errors
async def get_authenticated_user(
    current_user_id: str = Depends(get_current_user_id),
    user_service: UserService = Depends(get_user_service),
) -> UserDetailResponse:
    """
    Get the account behind the current session.

    Raises:
        HTTPException(401): Missing or invalid session
        HTTPException(404): Account was deleted
    """
    user = await user_service.get_user(current_user_id)
    return map_user_detail_to_response(user)
