"""
Challenge domain models and schemas.

Request/response schemas for challenge operations.

Dependencies: pydantic
System role: Challenge API contracts
"""

from pydantic import BaseModel, Field


class CreateChallengeRequest(BaseModel):
    """Request schema for creating a challenge within a quest."""

    quest_id: str = Field(..., min_length=1, description="Owning quest ID")
    id: str | None = Field(
        None,
        min_length=1,
        max_length=64,
        description="Challenge ID within the quest (generated when omitted)",
    )
    name: str = Field(..., min_length=1, max_length=255, description="Challenge name")
    description: str = Field("", max_length=4096, description="Challenge description")
    latitude: float = Field(..., ge=-90, le=90, description="Location latitude")
    longitude: float = Field(..., ge=-180, le=180, description="Location longitude")
    stamp_name: str = Field("", max_length=255, description="Stamp awarded on completion")
    stamp_image_color: str = Field("", description="URL of the coloured stamp image")
    stamp_image_gray: str = Field("", description="URL of the grey stamp image")
    flavor_text: str = Field("", max_length=4096, description="Flavor text shown with the stamp")


class ChallengeResponse(BaseModel):
    """Response schema for challenge operations."""

    id: str
    quest_id: str
    name: str
    description: str | None
    latitude: float | None
    longitude: float | None
    stamp_name: str | None
    stamp_image_color: str | None
    stamp_image_gray: str | None
    flavor_text: str | None
