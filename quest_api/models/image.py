"""
Image upload schemas.

Dependencies: pydantic
System role: Image API contracts
"""

from datetime import datetime

from pydantic import BaseModel


class ImageUploadResponse(BaseModel):
    """Response schema for an uploaded image."""

    key: str
    url: str
    public: bool
    expires_at: datetime | None = None
