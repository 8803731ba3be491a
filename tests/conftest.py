"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory databases, seeded accounts, auth settings, service mocks
Dependencies: pytest, sqlalchemy, aiosqlite, fastapi
System role: Test infrastructure and fixture management
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

SQLITE_MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_database():
    """
    Create in-memory SQLite Database with every table.

    Yields:
        Database: Handle with FK enforcement on (lazy imported to avoid settings issues)
    """
    from backend.boundary.db.connection import Database

    database = Database(SQLITE_MEMORY_URL)
    await database.create_all()

    yield database

    # Cleanup
    await database.drop_all()
    await database.dispose()


@pytest.fixture
async def test_async_db(test_database):
    """
    Create an async session on the in-memory test database.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    async with test_database.session() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def seeded_users(test_async_db) -> dict[str, int]:
    """
    Insert two accounts, alice and bob.

    Returns:
        dict: username to user id
    """
    from backend.boundary.db.CRUD.user_crud import user_crud

    alice = await user_crud.create(
        test_async_db, username="alice", email="alice@example.com", password="alice-pw"
    )
    bob = await user_crud.create(
        test_async_db, username="bob", email="bob@example.com", password="bob-pw"
    )
    await test_async_db.commit()
    return {"alice": alice.id, "bob": bob.id}


@pytest.fixture
def auth_settings():
    """Auth settings with a fixed test secret."""
    from backend.configs.auth import AuthSettings

    return AuthSettings(secret_key="test-secret", access_token_expire_minutes=5)


@pytest.fixture
def now() -> datetime:
    return datetime.now(timezone.utc)


@pytest.fixture
def sample_course(now) -> dict:
    """Course dict as returned by CourseService."""
    return {
        "id": 1,
        "name": "Algorithms",
        "description": "Sorting and searching",
        "image": "algorithms.png",
        "user_id": 1,
        "video_id": 1,
        "created_at": now,
        "updated_at": now,
        "video_url": "",
    }


@pytest.fixture
def mock_enrollment_service():
    """
    Create mock EnrollmentService for testing.

    Returns:
        AsyncMock: Mocked EnrollmentService with async methods
    """
    service = AsyncMock()
    service.check_enrolled = AsyncMock(return_value=False)
    service.enroll = AsyncMock(
        return_value={"course_id": 1, "session_id": 1, "enrollment_count": 1}
    )
    service.withdraw = AsyncMock(return_value=True)
    service.get_user_enrollments = AsyncMock(return_value=[])
    return service
