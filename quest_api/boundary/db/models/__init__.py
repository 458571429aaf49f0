"""
Database ORM models package.

Exports all SQLAlchemy models for the application.
"""

from quest_api.boundary.db.models.quest_model import QuestModel
from quest_api.boundary.db.models.challenge_model import ChallengeModel
from quest_api.boundary.db.models.user_model import UserModel
from quest_api.boundary.db.models.progress_model import (
    UserCompletedChallengeModel,
    UserParticipatingQuestModel,
)

__all__ = [
    "QuestModel",
    "ChallengeModel",
    "UserModel",
    "UserParticipatingQuestModel",
    "UserCompletedChallengeModel",
]
