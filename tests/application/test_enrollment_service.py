"""
Tests for EnrollmentService.

Covers the enroll/withdraw lifecycle against an in-memory database:
session materialization, fan-out enrollment, withdrawal cleanup and
rollback on failure.
"""

from datetime import time
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from backend.application.services.course_service import CourseService
from backend.application.services.enrollment_service import (
    DEFAULT_SESSION_END,
    DEFAULT_SESSION_START,
    EnrollmentService,
)
from backend.boundary.db.models import EnrollmentModel, SessionModel
from backend.core.exceptions import (
    CourseNotFoundError,
    DatabaseError,
    IdentityNotFoundError,
    NoSessionsFoundError,
)


async def _count(db, model) -> int:
    return (await db.execute(select(func.count()).select_from(model))).scalar_one()


@pytest.fixture
def enrollment_service(test_async_db) -> EnrollmentService:
    return EnrollmentService(test_async_db)


@pytest.fixture
async def algorithms(test_async_db, seeded_users) -> dict:
    """Course "Algorithms" created by alice."""
    return await CourseService(test_async_db).create_course(
        name="Algorithms",
        description="Sorting and searching",
        image=None,
        owner_username="alice",
    )


class TestEnrollScenario:
    """End-to-end enroll/withdraw scenario for a single user."""

    @pytest.mark.asyncio
    async def test_enroll_creates_default_session_and_enrollment(
        self, test_async_db, enrollment_service, algorithms, seeded_users
    ) -> None:
        # Act
        result = await enrollment_service.enroll(algorithms["id"], "alice")

        # Assert
        sessions = (await test_async_db.execute(select(SessionModel))).scalars().all()
        assert len(sessions) == 1
        assert sessions[0].start_time == time(9, 0, 0)
        assert sessions[0].end_time == time(10, 30, 0)
        assert sessions[0].user_id == seeded_users["alice"]
        assert sessions[0].course_id == algorithms["id"]

        enrollments = (await test_async_db.execute(select(EnrollmentModel))).scalars().all()
        assert len(enrollments) == 1
        assert enrollments[0].status == "enrolled"
        assert enrollments[0].session_id == sessions[0].id

        assert result == {
            "course_id": algorithms["id"],
            "session_id": sessions[0].id,
            "enrollment_count": 1,
        }
        assert await enrollment_service.check_enrolled("alice", algorithms["id"]) is True

    @pytest.mark.asyncio
    async def test_withdraw_removes_session_and_enrollment(
        self, test_async_db, enrollment_service, algorithms
    ) -> None:
        # Arrange
        await enrollment_service.enroll(algorithms["id"], "alice")

        # Act
        withdrawn = await enrollment_service.withdraw("alice", algorithms["id"])

        # Assert
        assert withdrawn is True
        assert await _count(test_async_db, SessionModel) == 0
        assert await _count(test_async_db, EnrollmentModel) == 0
        assert await enrollment_service.check_enrolled("alice", algorithms["id"]) is False

    @pytest.mark.asyncio
    async def test_default_session_window(self) -> None:
        assert DEFAULT_SESSION_START == time(9, 0, 0)
        assert DEFAULT_SESSION_END == time(10, 30, 0)


class TestEnrollmentProperties:
    """Behavioral guarantees of the enrollment engine."""

    @pytest.mark.asyncio
    async def test_get_user_enrollments_lists_course_once_per_session(
        self, enrollment_service, algorithms
    ) -> None:
        # Arrange
        await enrollment_service.enroll(algorithms["id"], "alice")
        await enrollment_service.enroll(algorithms["id"], "alice")

        # Act
        courses = await enrollment_service.get_user_enrollments("alice")

        # Assert
        # First enroll: 1 row; second enroll: 2 rows (old + new session)
        assert [c["id"] for c in courses] == [algorithms["id"]] * 3
        assert courses[0]["name"] == "Algorithms"

    @pytest.mark.asyncio
    async def test_enrolling_twice_creates_two_sessions(
        self, test_async_db, enrollment_service, algorithms
    ) -> None:
        # Act
        first = await enrollment_service.enroll(algorithms["id"], "alice")
        second = await enrollment_service.enroll(algorithms["id"], "alice")

        # Assert
        assert first["session_id"] != second["session_id"]
        assert first["enrollment_count"] == 1
        assert second["enrollment_count"] == 2
        assert await _count(test_async_db, SessionModel) == 2
        assert await _count(test_async_db, EnrollmentModel) == 3

    @pytest.mark.asyncio
    async def test_enroll_fans_out_over_existing_sessions(
        self, test_async_db, enrollment_service, algorithms, seeded_users
    ) -> None:
        # Arrange
        await enrollment_service.enroll(algorithms["id"], "alice")

        # Act
        result = await enrollment_service.enroll(algorithms["id"], "bob")

        # Assert
        assert result["enrollment_count"] == 2
        stmt = select(func.count()).select_from(EnrollmentModel).where(
            EnrollmentModel.user_id == seeded_users["bob"]
        )
        assert (await test_async_db.execute(stmt)).scalar_one() == 2

    @pytest.mark.asyncio
    async def test_withdraw_after_double_enroll_removes_everything(
        self, test_async_db, enrollment_service, algorithms
    ) -> None:
        # Arrange
        await enrollment_service.enroll(algorithms["id"], "alice")
        await enrollment_service.enroll(algorithms["id"], "alice")

        # Act
        await enrollment_service.withdraw("alice", algorithms["id"])

        # Assert
        assert await _count(test_async_db, SessionModel) == 0
        assert await _count(test_async_db, EnrollmentModel) == 0
        assert await enrollment_service.get_user_enrollments("alice") == []

    @pytest.mark.asyncio
    async def test_withdraw_removes_other_users_enrollments_in_deleted_sessions(
        self, test_async_db, enrollment_service, algorithms
    ) -> None:
        # Arrange
        await enrollment_service.enroll(algorithms["id"], "alice")
        await enrollment_service.enroll(algorithms["id"], "bob")

        # Act
        await enrollment_service.withdraw("bob", algorithms["id"])

        # Assert
        assert await _count(test_async_db, SessionModel) == 0
        assert await _count(test_async_db, EnrollmentModel) == 0
        assert await enrollment_service.check_enrolled("alice", algorithms["id"]) is False


class TestEnrollmentErrors:
    """Failure paths."""

    @pytest.mark.asyncio
    async def test_withdraw_without_sessions_raises(
        self, enrollment_service, algorithms
    ) -> None:
        with pytest.raises(NoSessionsFoundError):
            await enrollment_service.withdraw("alice", algorithms["id"])

    @pytest.mark.asyncio
    async def test_enroll_unknown_user_raises(self, enrollment_service, algorithms) -> None:
        with pytest.raises(IdentityNotFoundError):
            await enrollment_service.enroll(algorithms["id"], "mallory")

    @pytest.mark.asyncio
    async def test_enroll_missing_course_raises_and_creates_nothing(
        self, test_async_db, enrollment_service, seeded_users
    ) -> None:
        with pytest.raises(CourseNotFoundError):
            await enrollment_service.enroll(999, "alice")

        assert await _count(test_async_db, SessionModel) == 0

    @pytest.mark.asyncio
    async def test_check_enrolled_false_without_session(
        self, enrollment_service, algorithms
    ) -> None:
        assert await enrollment_service.check_enrolled("bob", algorithms["id"]) is False

    @pytest.mark.asyncio
    async def test_enroll_rolls_back_session_when_enrollment_insert_fails(
        self, test_async_db, enrollment_service, algorithms
    ) -> None:
        # Arrange
        failing_create = AsyncMock(side_effect=OperationalError("INSERT", {}, Exception("disk full")))

        # Act
        with patch(
            "backend.application.services.enrollment_service.enrollment_crud.create",
            failing_create,
        ):
            with pytest.raises(DatabaseError) as exc_info:
                await enrollment_service.enroll(algorithms["id"], "alice")

        # Assert
        assert exc_info.value.details["operation"] == "enroll"
        assert await _count(test_async_db, SessionModel) == 0
