"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from quest_api.boundary.db.CRUD import quest_crud, challenge_crud

    quest = await quest_crud.get_with_challenges(db, quest_id)
"""

from quest_api.boundary.db.CRUD.base_crud import BaseCRUD
from quest_api.boundary.db.CRUD.quest_crud import QuestCRUD, quest_crud
from quest_api.boundary.db.CRUD.challenge_crud import ChallengeCRUD, challenge_crud
from quest_api.boundary.db.CRUD.user_crud import UserCRUD, user_crud
from quest_api.boundary.db.CRUD.progress_crud import (
    UserCompletedChallengeCRUD,
    UserParticipatingQuestCRUD,
    user_completed_challenge_crud,
    user_participating_quest_crud,
)

__all__ = [
    "BaseCRUD",
    "QuestCRUD",
    "quest_crud",
    "ChallengeCRUD",
    "challenge_crud",
    "UserCRUD",
    "user_crud",
    "UserParticipatingQuestCRUD",
    "user_participating_quest_crud",
    "UserCompletedChallengeCRUD",
    "user_completed_challenge_crud",
]
