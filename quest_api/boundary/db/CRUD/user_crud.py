"""
User CRUD operations.

Dependencies: sqlalchemy, quest_api.boundary.db.models
System role: User account persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from quest_api.boundary.db.models.quest_model import QuestModel
from quest_api.boundary.db.models.user_model import UserModel
from quest_api.boundary.db.models.progress_model import UserParticipatingQuestModel
from quest_api.boundary.db.CRUD.base_crud import BaseCRUD


class UserCRUD(BaseCRUD[UserModel]):
    """CRUD operations for UserModel with login lookups."""

    def __init__(self) -> None:
        """Initialize UserCRUD with UserModel."""
        super().__init__(UserModel)

    async def get_by_email(self, session: AsyncSession, email: str) -> UserModel | None:
        """
        Retrieve user by email address.

        Args:
            session: Async database session
            email: Email address

        Returns:
            UserModel if found, None otherwise
        """
        stmt = select(UserModel).where(UserModel.email == email)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_username(self, session: AsyncSession, username: str) -> UserModel | None:
        """
        Retrieve user by username.

        Args:
            session: Async database session
            username: Login name

        Returns:
            UserModel if found, None otherwise
        """
        stmt = select(UserModel).where(UserModel.username == username)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_participating_quests(
        self,
        session: AsyncSession,
        user_id: str,
    ) -> Sequence[QuestModel]:
        """
        Retrieve the quests a user participates in.

        Args:
            session: Async database session
            user_id: User ID

        Returns:
            Sequence of QuestModels joined through user_participating_quests
        """
        stmt = (
            select(QuestModel)
            .join(
                UserParticipatingQuestModel,
                UserParticipatingQuestModel.quest_id == QuestModel.id,
            )
            .where(UserParticipatingQuestModel.user_id == user_id)
            .order_by(QuestModel.title)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


user_crud = UserCRUD()
