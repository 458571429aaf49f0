"""
Challenge ORM model.

Represents a location-bound sub-task of a quest. Challenge ids are
scoped to their quest: the primary key is the (quest_id, id) pair, so
the same id may appear under different quests.

Dependencies: sqlalchemy, quest_api.boundary.db.base
System role: Challenge persistence
"""

from sqlalchemy import Float, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quest_api.boundary.db.base import Base, StringIdMixin


class ChallengeModel(Base, StringIdMixin):
    """
    Challenge ORM model.

    Attributes:
        quest_id: Owning quest, part of the primary key
        id: Challenge id, unique within its quest
        name: Challenge name
        description: Challenge description
        latitude: Location latitude
        longitude: Location longitude
        stamp_name: Name of the stamp awarded on completion
        stamp_image_color: URL of the coloured stamp image
        stamp_image_gray: URL of the grey (not yet earned) stamp image
        flavor_text: Flavor text shown with the stamp
    """

    __tablename__ = "challenges"

    quest_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("quests.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    latitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    longitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    stamp_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    stamp_image_color: Mapped[str | None] = mapped_column(Text, nullable=True)
    stamp_image_gray: Mapped[str | None] = mapped_column(Text, nullable=True)
    flavor_text: Mapped[str | None] = mapped_column(Text, nullable=True)

    quest = relationship("QuestModel", back_populates="challenges")
