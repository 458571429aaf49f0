"""
S3 image bucket configuration.

Settings for the public and private image buckets and presigned URL
generation.

Dependencies: pydantic_settings
System role: S3 image bucket configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class S3ImagesSettings(BaseSettings):
    """Settings for S3 image bucket operations."""

    model_config = SettingsConfigDict(
        env_prefix="S3_IMAGES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    public_bucket: str = Field(
        default="quest-dev-public-images",
        description="Bucket for publicly readable images (stamps, quest art)",
    )
    private_bucket: str = Field(
        default="quest-dev-private-images",
        description="Bucket for images only served through presigned URLs",
    )
    region: str = Field(
        default="ap-northeast-1",
        description="AWS region for S3 buckets",
    )
    endpoint_url: str | None = Field(
        default=None,
        description="Endpoint override, e.g. http://localhost:4566 for LocalStack",
    )
    presigned_url_expiry: int = Field(
        default=3600,
        description="Presigned URL expiry in seconds (default 1 hour)",
    )
    max_upload_bytes: int = Field(
        default=5 * 1024 * 1024,
        description="Largest accepted image upload in bytes",
    )
