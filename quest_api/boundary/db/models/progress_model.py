"""
User progress ORM models.

Join tables recording which quests a user participates in and which
challenges a user has completed. Neither table has a surrogate key;
the (user, target) pair is the identity and carries a named unique
constraint, so inserting the same pair twice fails in the database.

Dependencies: sqlalchemy, quest_api.boundary.db.base
System role: Participation and completion persistence
"""

from sqlalchemy import Column, ForeignKey, String, Table, UniqueConstraint

from quest_api.boundary.db.base import Base

user_participating_quests_table = Table(
    "user_participating_quests",
    Base.metadata,
    Column("user_id", String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("quest_id", String, ForeignKey("quests.id", ondelete="CASCADE"), nullable=False),
    UniqueConstraint("user_id", "quest_id", name="unique_user_quest_pair"),
)

user_completed_challenges_table = Table(
    "user_completed_challenges",
    Base.metadata,
    Column("user_id", String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    # Challenge ids are only unique per quest, so no foreign key here.
    Column("challenge_id", String, nullable=False),
    UniqueConstraint("user_id", "challenge_id", name="unique_user_challenge_pair"),
)


class UserParticipatingQuestModel(Base):
    """
    Participation of a user in a quest.

    Attributes:
        user_id: Participating user
        quest_id: Quest participated in
    """

    __table__ = user_participating_quests_table
    __mapper_args__ = {
        "primary_key": [
            user_participating_quests_table.c.user_id,
            user_participating_quests_table.c.quest_id,
        ]
    }


class UserCompletedChallengeModel(Base):
    """
    Completion of a challenge by a user.

    Attributes:
        user_id: User who completed the challenge
        challenge_id: Completed challenge
    """

    __table__ = user_completed_challenges_table
    __mapper_args__ = {
        "primary_key": [
            user_completed_challenges_table.c.user_id,
            user_completed_challenges_table.c.challenge_id,
        ]
    }
