"""
Quest ORM model.

Represents a quest users can participate in. A quest owns the
challenges scoped to it.

Dependencies: sqlalchemy, quest_api.boundary.db.base
System role: Quest persistence
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quest_api.boundary.db.base import Base, StringIdMixin


class QuestModel(Base, StringIdMixin):
    """
    Quest ORM model.

    Attributes:
        id: String primary key
        title: Quest title
        description: Free-form description
        price: Price in whole currency units, 0 means free
        difficulty: One of Easy, Normal, Hard
        num_participate: Number of participating users
        num_clear: Number of users who cleared the quest
        challenges: Challenges scoped to this quest

    Relationships:
        challenges: One-to-many with ChallengeModel (CASCADE on quest deletion)
    """

    __tablename__ = "quests"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    difficulty: Mapped[str | None] = mapped_column(String(16), nullable=True)
    num_participate: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    num_clear: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)

    challenges = relationship(
        "ChallengeModel",
        back_populates="quest",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ChallengeModel.name",
    )
