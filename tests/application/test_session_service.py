"""
Tests for SessionService.
"""

from datetime import time

import pytest

from backend.application.services.course_service import CourseService
from backend.application.services.enrollment_service import EnrollmentService
from backend.application.services.session_service import SessionService
from backend.application.services.video_service import VideoService
from backend.core.exceptions import IdentityNotFoundError, SessionNotFoundError


@pytest.fixture
def session_service(test_async_db) -> SessionService:
    return SessionService(test_async_db)


@pytest.fixture
async def course(test_async_db, seeded_users) -> dict:
    return await CourseService(test_async_db).create_course("Algorithms", None, None, "alice")


class TestSessionLifecycle:
    """Create, read, update and delete scheduled sessions."""

    @pytest.mark.asyncio
    async def test_create_and_get_session(self, session_service, course, seeded_users) -> None:
        # Act
        session_id = await session_service.create_session(course["id"], time(14), time(15, 30), "alice")

        # Assert
        data = await session_service.get_session(session_id)
        assert data["course_id"] == course["id"]
        assert data["start_time"] == time(14)
        assert data["end_time"] == time(15, 30)
        assert data["user_id"] == seeded_users["alice"]
        assert await session_service.session_exists(session_id) is True

    @pytest.mark.asyncio
    async def test_create_session_unknown_owner(self, session_service, course) -> None:
        with pytest.raises(IdentityNotFoundError):
            await session_service.create_session(course["id"], time(8), time(9), "mallory")

    @pytest.mark.asyncio
    async def test_get_missing_session_raises(self, session_service) -> None:
        with pytest.raises(SessionNotFoundError):
            await session_service.get_session(31)

    @pytest.mark.asyncio
    async def test_update_session(self, session_service, course) -> None:
        # Arrange
        session_id = await session_service.create_session(course["id"], time(8), time(9), "alice")

        # Act
        updated = await session_service.update_session(session_id, course["id"], time(10), time(11))

        # Assert
        assert updated == 1
        assert (await session_service.get_session(session_id))["start_time"] == time(10)

    @pytest.mark.asyncio
    async def test_sessions_by_course_are_ordered(self, session_service, course) -> None:
        first = await session_service.create_session(course["id"], time(8), time(9), "alice")
        second = await session_service.create_session(course["id"], time(10), time(11), "bob")

        sessions = await session_service.get_sessions_by_course(course["id"])

        assert [s["id"] for s in sessions] == [first, second]


class TestDeleteSession:
    """Test suite for SessionService.delete_session_by_id()."""

    @pytest.mark.asyncio
    async def test_delete_session_removes_enrollments_and_detaches_videos(
        self, test_async_db, session_service, course
    ) -> None:
        # Arrange
        enrollment_service = EnrollmentService(test_async_db)
        result = await enrollment_service.enroll(course["id"], "bob")
        video = await VideoService(test_async_db).upload_video("bob", "Lecture 1", "videos/l1.mp4")

        # Act
        deleted = await session_service.delete_session_by_id(result["session_id"])

        # Assert
        assert deleted == 1
        assert await session_service.session_exists(result["session_id"]) is False
        assert await enrollment_service.check_enrolled("bob", course["id"]) is False
        assert (await VideoService(test_async_db).get_video(video["id"]))["session_id"] is None

    @pytest.mark.asyncio
    async def test_delete_missing_session_returns_zero(self, session_service) -> None:
        assert await session_service.delete_session_by_id(999) == 0
