"""
DynamoDB item types.

Dataclasses for the items stored in the key-value tables and their
conversions to and from the low-level attribute value format.

Dependencies: quest_api.models.common
System role: Item mapping for the DynamoDB boundary
"""

from dataclasses import dataclass
from typing import Any

from quest_api.models.common import Difficulty


def _s(item: dict[str, Any], name: str) -> str:
    return item[name]["S"]


def _n(item: dict[str, Any], name: str) -> str:
    return item[name]["N"]


@dataclass
class UserItem:
    """Item of the users table."""

    id: str
    email: str
    name: str
    hashed_password: str

    def to_item(self) -> dict[str, Any]:
        return {
            "UserId": {"S": self.id},
            "UserEmail": {"S": self.email},
            "UserName": {"S": self.name},
            "UserPassword": {"S": self.hashed_password},
        }

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "UserItem":
        return cls(
            id=_s(item, "UserId"),
            email=_s(item, "UserEmail"),
            name=_s(item, "UserName"),
            hashed_password=_s(item, "UserPassword"),
        )


@dataclass
class QuestItem:
    """Item of the quests table."""

    id: str
    title: str
    description: str
    price: int
    difficulty: Difficulty

    def to_item(self) -> dict[str, Any]:
        return {
            "QuestId": {"S": self.id},
            "QuestTitle": {"S": self.title},
            "QuestDescription": {"S": self.description},
            "QuestPrice": {"N": str(self.price)},
            "QuestDifficulty": {"S": Difficulty(self.difficulty).value},
        }

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "QuestItem":
        return cls(
            id=_s(item, "QuestId"),
            title=_s(item, "QuestTitle"),
            description=_s(item, "QuestDescription"),
            price=int(_n(item, "QuestPrice")),
            difficulty=Difficulty(_s(item, "QuestDifficulty")),
        )


@dataclass
class ChallengeItem:
    """Item of the challenges table, keyed by (quest_id, id)."""

    id: str
    quest_id: str
    title: str
    description: str
    lat: float
    lon: float

    def to_item(self) -> dict[str, Any]:
        return {
            "QuestId": {"S": self.quest_id},
            "ChallengeId": {"S": self.id},
            "ChallengeTitle": {"S": self.title},
            "ChallengeDescription": {"S": self.description},
            "ChallengeLat": {"N": repr(float(self.lat))},
            "ChallengeLon": {"N": repr(float(self.lon))},
        }

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "ChallengeItem":
        return cls(
            id=_s(item, "ChallengeId"),
            quest_id=_s(item, "QuestId"),
            title=_s(item, "ChallengeTitle"),
            description=_s(item, "ChallengeDescription"),
            lat=float(_n(item, "ChallengeLat")),
            lon=float(_n(item, "ChallengeLon")),
        )
