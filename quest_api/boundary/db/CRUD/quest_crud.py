"""
Quest CRUD operations.

Provides Create, Read, Update, Delete operations for QuestModel
with eager loading of the quest's challenges.

Dependencies: sqlalchemy, quest_api.boundary.db.models
System role: Quest persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from quest_api.boundary.db.models.quest_model import QuestModel
from quest_api.boundary.db.CRUD.base_crud import BaseCRUD


class QuestCRUD(BaseCRUD[QuestModel]):
    """
    CRUD operations for QuestModel.

    Extends BaseCRUD with eager loading of related challenges.
    """

    def __init__(self) -> None:
        """Initialize QuestCRUD with QuestModel."""
        super().__init__(QuestModel)

    async def get_with_challenges(
        self,
        session: AsyncSession,
        id: str,
    ) -> QuestModel | None:
        """
        Retrieve quest with eagerly loaded challenges.

        Args:
            session: Async database session
            id: Quest ID

        Returns:
            QuestModel with challenges loaded, None if not found
        """
        stmt = (
            select(QuestModel)
            .where(QuestModel.id == id)
            .options(selectinload(QuestModel.challenges))
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_all_with_challenges(
        self,
        session: AsyncSession,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[QuestModel]:
        """
        Retrieve all quests with eagerly loaded challenges.

        Args:
            session: Async database session
            limit: Maximum number of quests to return
            offset: Number of quests to skip

        Returns:
            Sequence of QuestModels with challenges loaded
        """
        stmt = (
            select(QuestModel)
            .options(selectinload(QuestModel.challenges))
            .order_by(QuestModel.title)
            .offset(offset)
            .execution_options(populate_existing=True)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()


quest_crud = QuestCRUD()
