"""
Challenge service orchestrator.

Dependencies: quest_api.boundary.db.CRUD, quest_api.core.exceptions
System role: Challenge use case orchestration
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from quest_api.application.services.quest_service import challenge_to_dict
from quest_api.boundary.db.CRUD.challenge_crud import challenge_crud
from quest_api.boundary.db.CRUD.quest_crud import quest_crud
from quest_api.core.exceptions import DuplicateEntryError, ResourceNotFoundError

logger = logging.getLogger(__name__)


class ChallengeService:
    """Challenge service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize challenge service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def create_challenge(self, quest_id: str, challenge_id: str | None = None, **fields) -> dict:
        """
        Create a challenge inside an existing quest.

        Args:
            quest_id: Owning quest ID
            challenge_id: ID within the quest (generated when None)
            **fields: name, description, latitude, longitude, stamp_name,
                stamp_image_color, stamp_image_gray, flavor_text

        Returns:
            dict: Created challenge

        Raises:
            ResourceNotFoundError: If the quest does not exist
            DuplicateEntryError: If the quest already has a challenge with this ID
        """
        if not await quest_crud.exists(self.db, quest_id):
            raise ResourceNotFoundError("quest", quest_id)

        if challenge_id is not None:
            if await challenge_crud.get_in_quest(self.db, quest_id, challenge_id):
                raise DuplicateEntryError(
                    "challenge", {"quest_id": quest_id, "challenge_id": challenge_id}
                )
            fields["id"] = challenge_id

        try:
            challenge = await challenge_crud.create(self.db, quest_id=quest_id, **fields)
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise DuplicateEntryError(
                "challenge", {"quest_id": quest_id, "challenge_id": challenge_id}
            ) from e

        logger.info(
            "Challenge created",
            extra={"quest_id": quest_id, "challenge_id": challenge.id},
        )
        return challenge_to_dict(challenge)

    async def get_challenge(self, quest_id: str, challenge_id: str) -> dict:
        """
        Get a challenge by its quest-scoped key.

        Raises:
            ResourceNotFoundError: If no such challenge exists in the quest
        """
        challenge = await challenge_crud.get_in_quest(self.db, quest_id, challenge_id)
        if not challenge:
            raise ResourceNotFoundError("challenge", challenge_id, {"quest_id": quest_id})
        return challenge_to_dict(challenge)

    async def get_challenges_by_quest(self, quest_id: str) -> list[dict]:
        """List the challenges of a quest (empty for unknown quests)."""
        challenges = await challenge_crud.get_by_quest_id(self.db, quest_id)
        return [challenge_to_dict(c) for c in challenges]
