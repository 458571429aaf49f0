"""
Quest domain models and schemas.

Request/response schemas for quest operations.

Dependencies: pydantic
System role: Quest API contracts
"""

from pydantic import BaseModel, Field

from quest_api.models.challenge import ChallengeResponse
from quest_api.models.common import Difficulty


class CreateQuestRequest(BaseModel):
    """Request schema for creating a new quest."""

    title: str = Field(..., min_length=1, max_length=255, description="Quest title")
    description: str = Field("", max_length=4096, description="Quest description")
    price: int = Field(0, ge=0, description="Price, 0 means free")
    difficulty: Difficulty = Field(..., description="Easy, Normal or Hard")


class UpdateQuestRequest(BaseModel):
    """Request schema for partially updating a quest. Omitted fields keep their value."""

    title: str | None = Field(None, min_length=1, max_length=255, description="Quest title")
    description: str | None = Field(None, max_length=4096, description="Quest description")
    price: int | None = Field(None, ge=0, description="Price, 0 means free")
    difficulty: Difficulty | None = Field(None, description="Easy, Normal or Hard")
    num_participate: int | None = Field(None, ge=0, description="Participant count")
    num_clear: int | None = Field(None, ge=0, description="Clear count")


class QuestResponse(BaseModel):
    """Response schema for quest operations."""

    id: str
    title: str
    description: str | None
    price: int | None
    difficulty: Difficulty | None
    num_participate: int | None
    num_clear: int | None


class QuestDetailResponse(QuestResponse):
    """Response schema for quest with its challenges."""

    challenges: list[ChallengeResponse] = Field(default_factory=list)
