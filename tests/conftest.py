"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory database sessions, service mocks, sample payloads
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
async def test_engine():
    """
    Create in-memory SQLite async engine with every table created.

    Yields:
        AsyncEngine: Engine shared by all sessions of one test
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool
    from quest_api.boundary.db.base import Base
    import quest_api.boundary.db.models  # noqa: F401  registers tables

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_async_db(test_engine):
    """
    Create a session on the in-memory SQLite database.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest.fixture
def sample_quest() -> dict:
    """Quest dict as returned by QuestService."""
    return {
        "id": str(uuid.uuid4()),
        "title": "Castle Walk",
        "description": "Visit the old castle grounds",
        "price": 0,
        "difficulty": "Easy",
        "num_participate": 0,
        "num_clear": 0,
        "challenges": [],
    }


@pytest.fixture
def sample_challenge(sample_quest) -> dict:
    """Challenge dict as returned by ChallengeService."""
    return {
        "id": "gate",
        "quest_id": sample_quest["id"],
        "name": "Main Gate",
        "description": "Find the main gate",
        "latitude": 35.6895,
        "longitude": 139.6917,
        "stamp_name": "Gate Stamp",
        "stamp_image_color": "https://example.com/gate.png",
        "stamp_image_gray": "https://example.com/gate-gray.png",
        "flavor_text": "Built in 1603",
    }


@pytest.fixture
def sample_user() -> dict:
    """User dict as returned by UserService."""
    return {
        "id": str(uuid.uuid4()),
        "username": "alice",
        "email": "alice@example.com",
    }


@pytest.fixture
def mock_quest_service():
    """
    Create mock QuestService for testing.

    Returns:
        AsyncMock: Mocked QuestService with async methods
    """
    service = AsyncMock()
    service.db = AsyncMock()
    return service


@pytest.fixture
def mock_progress_service():
    """Create mock ProgressService for testing."""
    return AsyncMock()


@pytest.fixture
def mock_s3_client():
    """
    Create mock S3ImageClient for testing.

    Returns:
        MagicMock: Mocked client with synchronous boto3-style methods
    """
    client = MagicMock()
    client.public_url = MagicMock(
        side_effect=lambda key: f"https://public.s3.ap-northeast-1.amazonaws.com/{key}"
    )
    return client
