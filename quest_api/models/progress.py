"""
User progress schemas.

Dependencies: pydantic
System role: Participation and completion API contracts
"""

from pydantic import BaseModel


class ParticipateQuestResponse(BaseModel):
    """Response schema for joining a quest."""

    user_id: str
    quest_id: str


class CompleteChallengeResponse(BaseModel):
    """Response schema for completing a challenge."""

    user_id: str
    challenge_id: str
