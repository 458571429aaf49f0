"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, StringIdMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - QuestModel, ChallengeModel, UserModel and the progress join models
  - quest_crud, challenge_crud, user_crud and the progress CRUD singletons

Dependencies: sqlalchemy, quest_api.configs
System role: Relational storage for quests, challenges, users and user progress
"""

from quest_api.boundary.db.base import Base, StringIdMixin
from quest_api.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from quest_api.boundary.db.models import (
    ChallengeModel,
    QuestModel,
    UserCompletedChallengeModel,
    UserModel,
    UserParticipatingQuestModel,
)
from quest_api.boundary.db.CRUD import (
    BaseCRUD,
    challenge_crud,
    quest_crud,
    user_completed_challenge_crud,
    user_crud,
    user_participating_quest_crud,
)

__all__ = [
    # Base classes
    "Base",
    "StringIdMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "QuestModel",
    "ChallengeModel",
    "UserModel",
    "UserParticipatingQuestModel",
    "UserCompletedChallengeModel",
    # CRUD
    "BaseCRUD",
    "quest_crud",
    "challenge_crud",
    "user_crud",
    "user_participating_quest_crud",
    "user_completed_challenge_crud",
]
