"""
Progress service orchestrator.

Records quest participation and challenge completion for users and
lists what a user has joined or completed.

Dependencies: quest_api.boundary.db.CRUD, quest_api.core.exceptions
System role: User progress use case orchestration
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from quest_api.boundary.db.CRUD.challenge_crud import challenge_crud
from quest_api.boundary.db.CRUD.progress_crud import (
    user_completed_challenge_crud,
    user_participating_quest_crud,
)
from quest_api.boundary.db.CRUD.quest_crud import quest_crud
from quest_api.boundary.db.CRUD.user_crud import user_crud
from quest_api.core.exceptions import DuplicateEntryError, ResourceNotFoundError

logger = logging.getLogger(__name__)


class ProgressService:
    """Progress service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize progress service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def _ensure_user(self, user_id: str) -> None:
        # Tokens outlive deleted accounts.
        if not await user_crud.exists(self.db, user_id):
            raise ResourceNotFoundError("user", user_id)

    async def participate_quest(self, user_id: str, quest_id: str) -> dict:
        """
        Record that a user joins a quest.

        Args:
            user_id: Authenticated user ID
            quest_id: Quest ID

        Returns:
            dict: The recorded (user_id, quest_id) pair

        Raises:
            ResourceNotFoundError: If the user or the quest does not exist
            DuplicateEntryError: If the user already participates
            IntegrityError: If the insert fails for any other constraint
        """
        await self._ensure_user(user_id)
        if not await quest_crud.exists(self.db, quest_id):
            raise ResourceNotFoundError("quest", quest_id)

        try:
            await user_participating_quest_crud.add(self.db, user_id, quest_id)
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            if await user_participating_quest_crud.exists(self.db, user_id, quest_id):
                raise DuplicateEntryError(
                    "quest participation", {"user_id": user_id, "quest_id": quest_id}
                ) from e
            raise

        logger.info("Quest joined", extra={"user_id": user_id, "quest_id": quest_id})
        return {"user_id": user_id, "quest_id": quest_id}

    async def complete_challenge(self, user_id: str, challenge_id: str) -> dict:
        """
        Record that a user completed a challenge.

        Args:
            user_id: Authenticated user ID
            challenge_id: Challenge ID

        Returns:
            dict: The recorded (user_id, challenge_id) pair

        Raises:
            ResourceNotFoundError: If the user does not exist or no quest has
                a challenge with this ID
            DuplicateEntryError: If the user already completed it
            IntegrityError: If the insert fails for any other constraint
        """
        await self._ensure_user(user_id)
        if not await challenge_crud.exists(self.db, challenge_id):
            raise ResourceNotFoundError("challenge", challenge_id)

        try:
            await user_completed_challenge_crud.add(self.db, user_id, challenge_id)
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            if await user_completed_challenge_crud.exists(self.db, user_id, challenge_id):
                raise DuplicateEntryError(
                    "challenge completion", {"user_id": user_id, "challenge_id": challenge_id}
                ) from e
            raise

        logger.info(
            "Challenge completed",
            extra={"user_id": user_id, "challenge_id": challenge_id},
        )
        return {"user_id": user_id, "challenge_id": challenge_id}

    async def get_participated_quest_ids(self, user_id: str) -> list[str]:
        """List the quest ids a user participates in."""
        return await user_participating_quest_crud.get_quest_ids_by_user(self.db, user_id)

    async def get_completed_challenge_ids(self, user_id: str) -> list[str]:
        """List the challenge ids a user completed."""
        return await user_completed_challenge_crud.get_challenge_ids_by_user(self.db, user_id)
