"""
Application services.

Use case orchestrators consumed by the API layer.
"""

from quest_api.application.services.quest_service import QuestService
from quest_api.application.services.challenge_service import ChallengeService
from quest_api.application.services.user_service import UserService
from quest_api.application.services.progress_service import ProgressService
from quest_api.application.services.image_service import ImageService

__all__ = [
    "QuestService",
    "ChallengeService",
    "UserService",
    "ProgressService",
    "ImageService",
]
