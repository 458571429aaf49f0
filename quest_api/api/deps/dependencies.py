"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: quest_api.configs, quest_api.application, quest_api.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from quest_api.application.services import (
    ChallengeService,
    ImageService,
    ProgressService,
    QuestService,
    UserService,
)
from quest_api.boundary.aws.s3_client import S3ImageClient
from quest_api.boundary.db import get_async_db
from quest_api.configs import Settings, get_settings


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_quest_service(db: AsyncSession = Depends(get_async_db)) -> QuestService:
    """
    Get quest service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        QuestService: Quest service instance
    """
    return QuestService(db=db)


def get_challenge_service(db: AsyncSession = Depends(get_async_db)) -> ChallengeService:
    """
    Get challenge service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        ChallengeService: Challenge service instance
    """
    return ChallengeService(db=db)


def get_user_service(db: AsyncSession = Depends(get_async_db)) -> UserService:
    """
    Get user service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        UserService: User service instance
    """
    return UserService(db=db)


def get_progress_service(db: AsyncSession = Depends(get_async_db)) -> ProgressService:
    """
    Get progress service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        ProgressService: Progress service instance
    """
    return ProgressService(db=db)


@lru_cache
def get_s3_image_client() -> S3ImageClient:
    """
    Get S3 image client, built once per process.

    Returns:
        S3ImageClient: Client for the public and private image buckets
    """
    settings = get_settings().s3_images
    return S3ImageClient(
        public_bucket=settings.public_bucket,
        private_bucket=settings.private_bucket,
        region=settings.region,
        endpoint_url=settings.endpoint_url,
    )


def get_image_service(
    s3_client: S3ImageClient = Depends(get_s3_image_client),
) -> ImageService:
    """
    Get image service instance.

    Args:
        s3_client: S3ImageClient (injected)

    Returns:
        ImageService: Image service instance
    """
    return ImageService(s3_client=s3_client, settings=get_settings().s3_images)
