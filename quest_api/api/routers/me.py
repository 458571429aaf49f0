"""
Current user progress endpoints.

Routes:
- GET /me/participated_quests - Quest ids the current user joined
- GET /me/completed_challenges - Challenge ids the current user completed

System role: Progress HTTP API
"""

from fastapi import APIRouter, Depends

from quest_api.api.deps.auth import get_current_user_id
from quest_api.api.deps.dependencies import get_progress_service
from quest_api.application.services.progress_service import ProgressService

from .error_handling import handle_service_errors

router = APIRouter(prefix="/me", tags=["me"])


@router.get("/participated_quests", response_model=list[str])
@handle_service_errors
async def participated_quests(
    current_user_id: str = Depends(get_current_user_id),
    progress_service: ProgressService = Depends(get_progress_service),
) -> list[str]:
    return await progress_service.get_participated_quest_ids(current_user_id)


@router.get("/completed_challenges", response_model=list[str])
@handle_service_errors
async def completed_challenges(
    current_user_id: str = Depends(get_current_user_id),
    progress_service: ProgressService = Depends(get_progress_service),
) -> list[str]:
    return await progress_service.get_completed_challenge_ids(current_user_id)
