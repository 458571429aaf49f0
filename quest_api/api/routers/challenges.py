"""
Challenge API endpoints.

Routes:
- POST /challenges - Create challenge in a quest
- GET /challenges?quest_id= - List challenges of a quest
- GET /challenges/{id}?quest_id= - Get challenge within a quest
- POST /challenges/{id}/complete - Complete challenge as the current user

Dependencies: quest_api.application.services, quest_api.models
System role: Challenge management HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Query

from quest_api.api.deps.auth import get_current_user_id
from quest_api.api.deps.dependencies import get_challenge_service, get_progress_service
from quest_api.application.services.challenge_service import ChallengeService
from quest_api.application.services.progress_service import ProgressService
from quest_api.models.challenge import ChallengeResponse, CreateChallengeRequest
from quest_api.models.progress import CompleteChallengeResponse

from .error_handling import handle_service_errors
from .responses import map_challenge_to_response, map_challenges_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/challenges", tags=["challenges"])


@router.post("", response_model=ChallengeResponse, status_code=201)
@handle_service_errors
async def create_challenge(
    request: CreateChallengeRequest,
    challenge_service: ChallengeService = Depends(get_challenge_service),
) -> ChallengeResponse:
    """
    Create challenge within an existing quest.

    Raises:
        HTTPException(404): Quest not found
        HTTPException(400): Challenge ID already used in the quest
    """
    fields = request.model_dump(exclude={"quest_id", "id"})
    challenge = await challenge_service.create_challenge(
        quest_id=request.quest_id,
        challenge_id=request.id,
        **fields,
    )
    return map_challenge_to_response(challenge)


@router.get("", response_model=list[ChallengeResponse])
@handle_service_errors
async def list_challenges(
    quest_id: str = Query(..., min_length=1),
    challenge_service: ChallengeService = Depends(get_challenge_service),
) -> list[ChallengeResponse]:
    """List the challenges of a quest."""
    challenges = await challenge_service.get_challenges_by_quest(quest_id)
    return map_challenges_to_response(challenges)


@router.get("/{challenge_id}", response_model=ChallengeResponse)
@handle_service_errors
async def get_challenge(
    challenge_id: str,
    quest_id: str = Query(..., min_length=1),
    challenge_service: ChallengeService = Depends(get_challenge_service),
) -> ChallengeResponse:
    """
    Get a challenge by its quest-scoped key.

    Raises:
        HTTPException(404): Challenge not found in the quest
    """
    challenge = await challenge_service.get_challenge(quest_id, challenge_id)
    return map_challenge_to_response(challenge)


@router.post(
    "/{challenge_id}/complete",
    response_model=CompleteChallengeResponse,
    status_code=201,
)
@handle_service_errors
async def complete_challenge(
    challenge_id: str,
    current_user_id: str = Depends(get_current_user_id),
    progress_service: ProgressService = Depends(get_progress_service),
) -> CompleteChallengeResponse:
    """
    Complete a challenge as the current user.

    Raises:
        HTTPException(400): Already completed
        HTTPException(404): Challenge not found
    """
    result = await progress_service.complete_challenge(current_user_id, challenge_id)
    return CompleteChallengeResponse(**result)
