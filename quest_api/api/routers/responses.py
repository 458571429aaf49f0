"""
Response mapping utilities.

Transforms service-layer dictionaries into Pydantic response models.
Centralizes response construction logic.

Dependencies: quest_api.models
System role: Response transformation
"""

from typing import Any

from quest_api.models.challenge import ChallengeResponse
from quest_api.models.quest import QuestDetailResponse
from quest_api.models.user import UserDetailResponse, UserResponse


def map_quest_to_response(quest_data: dict[str, Any]) -> QuestDetailResponse:
    """
    Transform quest data dictionary into QuestDetailResponse.

    Args:
        quest_data: Dictionary containing quest fields and a challenges list

    Returns:
        QuestDetailResponse: Pydantic model for API response
    """
    return QuestDetailResponse(**quest_data)


def map_quests_to_response(quests_data: list[dict[str, Any]]) -> list[QuestDetailResponse]:
    """Transform list of quest dictionaries into response models."""
    return [map_quest_to_response(quest) for quest in quests_data]


def map_challenge_to_response(challenge_data: dict[str, Any]) -> ChallengeResponse:
    """Transform challenge data dictionary into ChallengeResponse."""
    return ChallengeResponse(**challenge_data)


def map_challenges_to_response(challenges_data: list[dict[str, Any]]) -> list[ChallengeResponse]:
    """Transform list of challenge dictionaries into response models."""
    return [map_challenge_to_response(c) for c in challenges_data]


def map_user_to_response(user_data: dict[str, Any]) -> UserResponse:
    """
    Transform user data dictionary into UserResponse.

    Extra keys (such as a password hash) are ignored by the model.
    """
    return UserResponse(**user_data)


def map_user_detail_to_response(user_data: dict[str, Any]) -> UserDetailResponse:
    """Transform user data with participated quests into UserDetailResponse."""
    return UserDetailResponse(**user_data)
