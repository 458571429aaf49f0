"""
Quest service orchestrator.

Coordinates quest lifecycle operations. Quests are always returned with
their challenges.

Dependencies: quest_api.boundary.db.CRUD, quest_api.core.exceptions
System role: Quest use case orchestration
"""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from quest_api.boundary.db.CRUD.challenge_crud import challenge_crud
from quest_api.boundary.db.CRUD.progress_crud import user_participating_quest_crud
from quest_api.boundary.db.CRUD.quest_crud import quest_crud
from quest_api.boundary.db.models import ChallengeModel, QuestModel
from quest_api.core.exceptions import ResourceNotFoundError

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = (
    "title",
    "description",
    "price",
    "difficulty",
    "num_participate",
    "num_clear",
)


def challenge_to_dict(challenge: ChallengeModel) -> dict[str, Any]:
    """Flatten a challenge row for response mapping."""
    return {
        "id": challenge.id,
        "quest_id": challenge.quest_id,
        "name": challenge.name,
        "description": challenge.description,
        "latitude": challenge.latitude,
        "longitude": challenge.longitude,
        "stamp_name": challenge.stamp_name,
        "stamp_image_color": challenge.stamp_image_color,
        "stamp_image_gray": challenge.stamp_image_gray,
        "flavor_text": challenge.flavor_text,
    }


def quest_to_dict(quest: QuestModel, with_challenges: bool = True) -> dict[str, Any]:
    """Flatten a quest row, optionally with its loaded challenges."""
    data = {
        "id": quest.id,
        "title": quest.title,
        "description": quest.description,
        "price": quest.price,
        "difficulty": quest.difficulty,
        "num_participate": quest.num_participate,
        "num_clear": quest.num_clear,
    }
    if with_challenges:
        data["challenges"] = [challenge_to_dict(c) for c in quest.challenges]
    return data


class QuestService:
    """Quest service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize quest service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def create_quest(
        self,
        title: str,
        description: str,
        price: int,
        difficulty: str,
    ) -> dict:
        """
        Create new quest with zeroed counters.

        Args:
            title: Quest title
            description: Quest description
            price: Price, 0 means free
            difficulty: Easy, Normal or Hard

        Returns:
            dict: Created quest with an empty challenge list
        """
        quest = await quest_crud.create(
            self.db,
            title=title,
            description=description,
            price=price,
            difficulty=difficulty,
            num_participate=0,
            num_clear=0,
        )
        await self.db.commit()
        logger.info("Quest created", extra={"quest_id": quest.id, "title": title})
        return await self.get_quest(quest.id)

    async def get_quest(self, quest_id: str) -> dict:
        """
        Get quest by ID with its challenges.

        Args:
            quest_id: Quest ID

        Returns:
            dict: Quest data with challenges

        Raises:
            ResourceNotFoundError: If quest not found
        """
        quest = await quest_crud.get_with_challenges(self.db, quest_id)
        if not quest:
            raise ResourceNotFoundError("quest", quest_id)
        return quest_to_dict(quest)

    async def get_all_quests(self, limit: int | None = None, offset: int = 0) -> list[dict]:
        """
        Get all quests, each with its challenges.

        Args:
            limit: Maximum number of quests to return
            offset: Number of quests to skip

        Returns:
            list[dict]: Quest dicts ordered by title
        """
        quests = await quest_crud.get_all_with_challenges(self.db, limit=limit, offset=offset)
        return [quest_to_dict(q) for q in quests]

    async def update_quest(self, quest_id: str, **changes: Any) -> dict:
        """
        Partially update a quest.

        Fields passed as None (or not passed) keep their current value.

        Args:
            quest_id: Quest ID
            **changes: Any of title, description, price, difficulty,
                num_participate, num_clear

        Returns:
            dict: Updated quest with challenges

        Raises:
            ResourceNotFoundError: If quest not found
        """
        values = {
            field: value
            for field, value in changes.items()
            if field in UPDATABLE_FIELDS and value is not None
        }

        if not values:
            return await self.get_quest(quest_id)

        quest = await quest_crud.update_by_id(self.db, quest_id, **values)
        if quest is None:
            await self.db.rollback()
            raise ResourceNotFoundError("quest", quest_id)

        await self.db.commit()
        logger.info(
            "Quest updated",
            extra={"quest_id": quest_id, "fields": sorted(values)},
        )
        return await self.get_quest(quest_id)

    async def delete_quest(self, quest_id: str) -> None:
        """
        Delete quest together with its challenges and participation rows.

        Args:
            quest_id: Quest ID

        Raises:
            ResourceNotFoundError: If quest not found
        """
        if not await quest_crud.exists(self.db, quest_id):
            raise ResourceNotFoundError("quest", quest_id)

        try:
            challenges = await challenge_crud.delete_by_quest_id(self.db, quest_id)
            participants = await user_participating_quest_crud.delete_by_quest(self.db, quest_id)
            await quest_crud.delete_by_id(self.db, quest_id)
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to delete quest",
                extra={"error": str(e), "quest_id": quest_id},
            )
            raise

        logger.info(
            "Quest deleted",
            extra={
                "quest_id": quest_id,
                "challenges_deleted": challenges,
                "participations_deleted": participants,
            },
        )
