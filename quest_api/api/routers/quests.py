"""
Quest API endpoints.

Routes:
- POST /quests - Create quest
- GET /quests - List quests with their challenges
- GET /quests/{id} - Get quest with its challenges
- PATCH /quests/{id} - Partially update quest
- DELETE /quests/{id} - Delete quest and its challenges
- POST /quests/{id}/participate - Join quest as the current user

Dependencies: quest_api.application.services, quest_api.models
System role: Quest management HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Query

from quest_api.api.deps.auth import get_current_user_id
from quest_api.api.deps.dependencies import get_progress_service, get_quest_service
from quest_api.application.services.progress_service import ProgressService
from quest_api.application.services.quest_service import QuestService
from quest_api.models.progress import ParticipateQuestResponse
from quest_api.models.quest import (
    CreateQuestRequest,
    QuestDetailResponse,
    UpdateQuestRequest,
)

from .error_handling import handle_service_errors
from .responses import map_quest_to_response, map_quests_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quests", tags=["quests"])


@router.post("", response_model=QuestDetailResponse, status_code=201)
@handle_service_errors
async def create_quest(
    request: CreateQuestRequest,
    quest_service: QuestService = Depends(get_quest_service),
) -> QuestDetailResponse:
    """
    Create new quest.

    Raises:
        HTTPException(500): Creation failed
    """
    logger.info("Creating quest", extra={"title": request.title})
    quest = await quest_service.create_quest(
        title=request.title,
        description=request.description,
        price=request.price,
        difficulty=request.difficulty.value,
    )
    return map_quest_to_response(quest)


@router.get("", response_model=list[QuestDetailResponse])
@handle_service_errors
async def list_quests(
    limit: int | None = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    quest_service: QuestService = Depends(get_quest_service),
) -> list[QuestDetailResponse]:
    """List quests, each with its challenges."""
    quests = await quest_service.get_all_quests(limit=limit, offset=offset)
    logger.info("Quests retrieved", extra={"count": len(quests)})
    return map_quests_to_response(quests)


@router.get("/{quest_id}", response_model=QuestDetailResponse)
@handle_service_errors
async def get_quest(
    quest_id: str,
    quest_service: QuestService = Depends(get_quest_service),
) -> QuestDetailResponse:
    """
    Get single quest with its challenges.

    Raises:
        HTTPException(404): Quest not found
    """
    quest = await quest_service.get_quest(quest_id)
    return map_quest_to_response(quest)


@router.patch("/{quest_id}", response_model=QuestDetailResponse)
@handle_service_errors
async def update_quest(
    quest_id: str,
    request: UpdateQuestRequest,
    quest_service: QuestService = Depends(get_quest_service),
) -> QuestDetailResponse:
    """
    Partially update quest; omitted fields keep their value.

    Raises:
        HTTPException(404): Quest not found
    """
    changes = request.model_dump(exclude_none=True)
    if "difficulty" in changes:
        changes["difficulty"] = request.difficulty.value

    logger.info("Updating quest", extra={"quest_id": quest_id, "fields": sorted(changes)})
    quest = await quest_service.update_quest(quest_id, **changes)
    return map_quest_to_response(quest)


@router.delete("/{quest_id}", status_code=204)
@handle_service_errors
async def delete_quest(
    quest_id: str,
    quest_service: QuestService = Depends(get_quest_service),
) -> None:
    """
    Delete quest together with its challenges.

    Raises:
        HTTPException(404): Quest not found
    """
    await quest_service.delete_quest(quest_id)


@router.post(
    "/{quest_id}/participate",
    response_model=ParticipateQuestResponse,
    status_code=201,
)
@handle_service_errors
async def participate_quest(
    quest_id: str,
    current_user_id: str = Depends(get_current_user_id),
    progress_service: ProgressService = Depends(get_progress_service),
) -> ParticipateQuestResponse:
    """
    Join a quest as the current user.

    Raises:
        HTTPException(400): Already participating
        HTTPException(404): Quest not found
    """
    result = await progress_service.participate_quest(current_user_id, quest_id)
    return ParticipateQuestResponse(**result)
