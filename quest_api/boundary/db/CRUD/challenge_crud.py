"""
Challenge CRUD operations.

Challenges are keyed by (quest_id, id), so lookups go through the
owning quest rather than the single-column helpers of BaseCRUD.

Dependencies: sqlalchemy, quest_api.boundary.db.models
System role: Challenge persistence operations
"""

from typing import Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quest_api.boundary.db.models.challenge_model import ChallengeModel
from quest_api.boundary.db.CRUD.base_crud import BaseCRUD


class ChallengeCRUD(BaseCRUD[ChallengeModel]):
    """CRUD operations for ChallengeModel."""

    def __init__(self) -> None:
        """Initialize ChallengeCRUD with ChallengeModel."""
        super().__init__(ChallengeModel)

    async def get_in_quest(
        self,
        session: AsyncSession,
        quest_id: str,
        challenge_id: str,
    ) -> ChallengeModel | None:
        """
        Retrieve a challenge by its quest-scoped key.

        Args:
            session: Async database session
            quest_id: Owning quest ID
            challenge_id: Challenge ID within the quest

        Returns:
            ChallengeModel if found, None otherwise
        """
        stmt = select(ChallengeModel).where(
            ChallengeModel.quest_id == quest_id,
            ChallengeModel.id == challenge_id,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_in_quest(
        self,
        session: AsyncSession,
        quest_id: str,
        challenge_id: str,
        **kwargs,
    ) -> ChallengeModel | None:
        """
        Update a challenge by its quest-scoped key.

        Args:
            session: Async database session
            quest_id: Owning quest ID
            challenge_id: Challenge ID within the quest
            **kwargs: Fields to update with new values

        Returns:
            Updated ChallengeModel if found, None otherwise
        """
        stmt = (
            update(ChallengeModel)
            .where(
                ChallengeModel.quest_id == quest_id,
                ChallengeModel.id == challenge_id,
            )
            .values(**kwargs)
            .returning(ChallengeModel)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_in_quest(
        self,
        session: AsyncSession,
        quest_id: str,
        challenge_id: str,
    ) -> bool:
        """Delete a challenge by its quest-scoped key, returning whether it existed."""
        stmt = delete(ChallengeModel).where(
            ChallengeModel.quest_id == quest_id,
            ChallengeModel.id == challenge_id,
        )
        result = await session.execute(stmt)
        return result.rowcount > 0

    # Challenge ids repeat across quests, so id-only access is refused.
    async def get_by_id(self, session: AsyncSession, id: str) -> ChallengeModel | None:
        raise NotImplementedError("Use get_in_quest(quest_id, challenge_id)")

    async def update_by_id(self, session: AsyncSession, id: str, **kwargs) -> ChallengeModel | None:
        raise NotImplementedError("Use update_in_quest(quest_id, challenge_id, ...)")

    async def delete_by_id(self, session: AsyncSession, id: str) -> bool:
        raise NotImplementedError("Use delete_in_quest(quest_id, challenge_id)")

    async def get_by_quest_id(
        self,
        session: AsyncSession,
        quest_id: str,
    ) -> Sequence[ChallengeModel]:
        """
        Retrieve all challenges of a quest.

        Args:
            session: Async database session
            quest_id: Quest ID

        Returns:
            Sequence of ChallengeModels ordered by name
        """
        stmt = (
            select(ChallengeModel)
            .where(ChallengeModel.quest_id == quest_id)
            .order_by(ChallengeModel.name)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def exists(self, session: AsyncSession, id: str) -> bool:
        """
        Check whether any quest has a challenge with this id.

        Args:
            session: Async database session
            id: Challenge ID

        Returns:
            True if at least one challenge carries the id
        """
        stmt = select(ChallengeModel.id).where(ChallengeModel.id == id).limit(1)
        result = await session.execute(stmt)
        return result.first() is not None

    async def delete_by_quest_id(self, session: AsyncSession, quest_id: str) -> int:
        """
        Delete every challenge of a quest.

        Args:
            session: Async database session
            quest_id: Quest ID

        Returns:
            Number of deleted challenges
        """
        stmt = delete(ChallengeModel).where(ChallengeModel.quest_id == quest_id)
        result = await session.execute(stmt)
        return result.rowcount


challenge_crud = ChallengeCRUD()
