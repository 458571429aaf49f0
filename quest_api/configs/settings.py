"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from quest_api.configs.base import BaseSettings
from quest_api.configs.auth import AuthSettings
from quest_api.configs.database import DatabaseSettings
from quest_api.configs.dynamodb import DynamoDBSettings
from quest_api.configs.s3_images import S3ImagesSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = DatabaseSettings()
    dynamodb: DynamoDBSettings = DynamoDBSettings()
    s3_images: S3ImagesSettings = S3ImagesSettings()
    auth: AuthSettings = AuthSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from quest_api.configs import get_settings
        settings = get_settings()
    """
    return Settings()
