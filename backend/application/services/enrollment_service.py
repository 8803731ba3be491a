"""
Enrollment service orchestrator.

Coordinates session creation and enrollment-record lifecycle:

- enroll materializes a personal session (09:00-10:30) for the user under
  the course, then enrolls the user in every session of that course;
- withdraw removes the user's enrollments and deletes every matching
  session outright, which also removes it for other enrollees.

Each of these runs as a single transaction.

Dependencies: backend.boundary.db.CRUD, backend.boundary.db.models
System role: Enrollment use case orchestration
"""

import logging
from datetime import datetime, time, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from backend.application.services.course_service import course_to_dict
from backend.application.services.identity_service import IdentityService
from backend.boundary.db.CRUD.course_crud import course_crud
from backend.boundary.db.CRUD.enrollment_crud import enrollment_crud
from backend.boundary.db.CRUD.session_crud import session_crud
from backend.boundary.db.CRUD.video_crud import video_crud
from backend.boundary.db.models.enrollment_model import EnrollmentStatus
from backend.boundary.db.transaction import database_errors, transaction
from backend.core.exceptions import CourseNotFoundError, NoSessionsFoundError

logger = logging.getLogger(__name__)

DEFAULT_SESSION_START = time(9, 0, 0)
DEFAULT_SESSION_END = time(10, 30, 0)


class EnrollmentService:
    """Enrollment service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize enrollment service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db
        self.identity = IdentityService(db)

    async def check_enrolled(self, username: str, course_id: int) -> bool:
        """
        Check whether a user is enrolled in a course.

        Looks up the user's own (oldest) session under the course and
        checks for an enrollment row on it. No session means not enrolled.

        Args:
            username: Username
            course_id: Course id

        Returns:
            bool: True if enrolled

        Raises:
            IdentityNotFoundError: Username unknown
        """
        user_id = await self.identity.resolve(username)

        async with database_errors("check_enrolled"):
            session = await session_crud.get_first_for_user_and_course(self.db, user_id, course_id)
            if session is None:
                return False
            count = await enrollment_crud.count_for_user_and_session(self.db, user_id, session.id)

        return count > 0

    async def enroll(self, course_id: int, username: str) -> dict:
        """
        Enroll a user in a course.

        Creates a new default session owned by the user, then inserts one
        enrollment row for every session of the course (the new one and any
        that already existed). Calling this twice without withdrawing
        creates a second session and a second, overlapping set of rows.

        Args:
            course_id: Course id
            username: Username of the enrollee

        Returns:
            dict: course_id, session_id of the new session, enrollment_count

        Raises:
            IdentityNotFoundError: Username unknown
            CourseNotFoundError: Course does not exist
            DatabaseError: Any insert failed (nothing is kept)
        """
        async with transaction(self.db, "enroll"):
            user_id = await self.identity.resolve(username)

            if not await course_crud.exists(self.db, course_id):
                raise CourseNotFoundError(course_id)

            session = await session_crud.create(
                self.db,
                course_id=course_id,
                start_time=DEFAULT_SESSION_START,
                end_time=DEFAULT_SESSION_END,
                user_id=user_id,
            )

            session_ids = await session_crud.get_ids_by_course(self.db, course_id)
            enrolled_at = datetime.now(timezone.utc)
            for session_id in session_ids:
                await enrollment_crud.create(
                    self.db,
                    user_id=user_id,
                    session_id=session_id,
                    date=enrolled_at,
                    status=EnrollmentStatus.ENROLLED.value,
                )

        logger.info(
            "User enrolled",
            extra={
                "username": username,
                "course_id": course_id,
                "session_id": session.id,
                "enrollment_count": len(session_ids),
            },
        )
        return {
            "course_id": course_id,
            "session_id": session.id,
            "enrollment_count": len(session_ids),
        }

    async def withdraw(self, username: str, course_id: int) -> bool:
        """
        Withdraw a user from a course.

        Finds every session of the course the user holds an enrollment in,
        deletes the user's enrollments there, then deletes those sessions.
        Enrollments of other users in the same sessions are removed with
        them so no enrollment is left without its session.

        Args:
            username: Username of the enrollee
            course_id: Course id

        Returns:
            bool: True if any enrollment or session row was deleted

        Raises:
            IdentityNotFoundError: Username unknown
            NoSessionsFoundError: User holds no enrollment under the course
            DatabaseError: Any delete failed (nothing is removed)
        """
        async with transaction(self.db, "withdraw"):
            user_id = await self.identity.resolve(username)

            session_ids = await session_crud.get_enrolled_ids_for_user_and_course(
                self.db, user_id, course_id
            )
            if not session_ids:
                raise NoSessionsFoundError(username, course_id)

            affected = await enrollment_crud.delete_for_user_in_sessions(self.db, user_id, session_ids)

            others_removed = await enrollment_crud.delete_in_sessions(self.db, session_ids)
            if others_removed:
                logger.warning(
                    "Withdrawal removed other users' enrollments",
                    extra={
                        "course_id": course_id,
                        "session_ids": session_ids,
                        "enrollments_removed": others_removed,
                    },
                )

            await video_crud.detach_from_sessions(self.db, session_ids)
            affected += await session_crud.delete_many(self.db, session_ids)

        logger.info(
            "User withdrew",
            extra={
                "username": username,
                "course_id": course_id,
                "sessions_deleted": len(session_ids),
                "rows_affected": affected,
            },
        )
        return affected > 0

    async def get_user_enrollments(self, username: str) -> list[dict]:
        """
        List the courses a user is enrolled in.

        A course appears once per enrollment row, i.e. once for each of
        its sessions the user is enrolled in.

        Args:
            username: Username

        Returns:
            list[dict]: Course dicts ordered by enrollment

        Raises:
            IdentityNotFoundError: Username unknown
        """
        user_id = await self.identity.resolve(username)

        async with database_errors("get_user_enrollments"):
            courses = await enrollment_crud.get_courses_for_user(self.db, user_id)

        return [course_to_dict(c) for c in courses]
