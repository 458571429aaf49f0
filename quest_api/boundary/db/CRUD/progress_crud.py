"""
User progress CRUD operations.

Records participation and completion pairs. Inserts go through Core
INSERT statements so a repeated pair surfaces as the database's
IntegrityError rather than an ORM identity conflict.

Dependencies: sqlalchemy, quest_api.boundary.db.models
System role: Participation and completion persistence operations
"""

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from quest_api.boundary.db.models.progress_model import (
    UserCompletedChallengeModel,
    UserParticipatingQuestModel,
)


class UserParticipatingQuestCRUD:
    """Operations on the user_participating_quests join table."""

    model = UserParticipatingQuestModel

    async def add(self, session: AsyncSession, user_id: str, quest_id: str) -> None:
        """
        Record that a user participates in a quest.

        Args:
            session: Async database session
            user_id: Participating user ID
            quest_id: Quest ID

        Raises:
            IntegrityError: If the pair is already recorded
        """
        await session.execute(
            insert(self.model).values(user_id=user_id, quest_id=quest_id)
        )

    async def exists(self, session: AsyncSession, user_id: str, quest_id: str) -> bool:
        """Check whether the (user_id, quest_id) pair is recorded."""
        stmt = select(self.model.user_id).where(
            self.model.user_id == user_id,
            self.model.quest_id == quest_id,
        )
        result = await session.execute(stmt)
        return result.first() is not None

    async def get_quest_ids_by_user(self, session: AsyncSession, user_id: str) -> list[str]:
        """Return the ids of quests a user participates in."""
        stmt = select(self.model.quest_id).where(self.model.user_id == user_id)
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def get_user_ids_by_quest(self, session: AsyncSession, quest_id: str) -> list[str]:
        """Return the ids of users participating in a quest."""
        stmt = select(self.model.user_id).where(self.model.quest_id == quest_id)
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def delete_by_user(self, session: AsyncSession, user_id: str) -> int:
        """Delete every participation row of a user, returning the count."""
        result = await session.execute(delete(self.model).where(self.model.user_id == user_id))
        return result.rowcount

    async def delete_by_quest(self, session: AsyncSession, quest_id: str) -> int:
        """Delete every participation row of a quest, returning the count."""
        result = await session.execute(delete(self.model).where(self.model.quest_id == quest_id))
        return result.rowcount


class UserCompletedChallengeCRUD:
    """Operations on the user_completed_challenges join table."""

    model = UserCompletedChallengeModel

    async def add(self, session: AsyncSession, user_id: str, challenge_id: str) -> None:
        """
        Record that a user completed a challenge.

        Args:
            session: Async database session
            user_id: User ID
            challenge_id: Completed challenge ID

        Raises:
            IntegrityError: If the pair is already recorded
        """
        await session.execute(
            insert(self.model).values(user_id=user_id, challenge_id=challenge_id)
        )

    async def exists(self, session: AsyncSession, user_id: str, challenge_id: str) -> bool:
        """Check whether the (user_id, challenge_id) pair is recorded."""
        stmt = select(self.model.user_id).where(
            self.model.user_id == user_id,
            self.model.challenge_id == challenge_id,
        )
        result = await session.execute(stmt)
        return result.first() is not None

    async def get_challenge_ids_by_user(self, session: AsyncSession, user_id: str) -> list[str]:
        """Return the ids of challenges a user completed."""
        stmt = select(self.model.challenge_id).where(self.model.user_id == user_id)
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def get_user_ids_by_challenge(self, session: AsyncSession, challenge_id: str) -> list[str]:
        """Return the ids of users who completed a challenge."""
        stmt = select(self.model.user_id).where(self.model.challenge_id == challenge_id)
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def delete_by_user(self, session: AsyncSession, user_id: str) -> int:
        """Delete every completion row of a user, returning the count."""
        result = await session.execute(delete(self.model).where(self.model.user_id == user_id))
        return result.rowcount


user_participating_quest_crud = UserParticipatingQuestCRUD()
user_completed_challenge_crud = UserCompletedChallengeCRUD()
