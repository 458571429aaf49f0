"""
User domain models and schemas.

Request/response schemas for registration, login and user lookups.
Responses never carry the password hash.

Dependencies: pydantic
System role: User API contracts
"""

from pydantic import BaseModel, EmailStr, Field

from quest_api.models.quest import QuestResponse


class RegisterUserRequest(BaseModel):
    """Request schema for registering a user."""

    username: str = Field(..., min_length=1, max_length=64, description="Login name")
    email: EmailStr = Field(..., description="Contact address, unique")
    password: str = Field(..., min_length=8, max_length=128, description="Plain password")


class LoginUserRequest(BaseModel):
    """Request schema for logging in."""

    username: str = Field(..., min_length=1, description="Login name")
    password: str = Field(..., min_length=1, description="Plain password")


class UserResponse(BaseModel):
    """Response schema for a user."""

    id: str
    username: str
    email: str


class UserDetailResponse(UserResponse):
    """Response schema for a user with the quests they participate in."""

    participate_quest: list[QuestResponse] = Field(default_factory=list)
