"""
Enrollment CRUD operations.

Provides Create, Read, Delete operations for EnrollmentModel, including
the joined enrollment -> session -> course lookup.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Enrollment persistence operations
"""

from typing import Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.models.course_model import CourseModel
from backend.boundary.db.models.enrollment_model import EnrollmentModel
from backend.boundary.db.models.session_model import SessionModel
from backend.boundary.db.CRUD.base_crud import BaseCRUD


class EnrollmentCRUD(BaseCRUD[EnrollmentModel]):
    """CRUD operations for EnrollmentModel."""

    def __init__(self) -> None:
        """Initialize EnrollmentCRUD with EnrollmentModel."""
        super().__init__(EnrollmentModel)

    async def count_for_user_and_session(
        self,
        session: AsyncSession,
        user_id: int,
        session_id: int,
    ) -> int:
        """Count enrollment rows for a (user, session) pair."""
        stmt = (
            select(func.count())
            .select_from(EnrollmentModel)
            .where(EnrollmentModel.user_id == user_id, EnrollmentModel.session_id == session_id)
        )
        result = await session.execute(stmt)
        return result.scalar_one()

    async def get_courses_for_user(
        self,
        session: AsyncSession,
        user_id: int,
    ) -> Sequence[CourseModel]:
        """
        Retrieve the course of every enrollment a user holds.

        One joined query; a course is returned once per enrollment row,
        so it repeats when the user is enrolled in several of its sessions.

        Args:
            session: Async database session
            user_id: Enrolled user id

        Returns:
            Sequence of CourseModels ordered by enrollment id
        """
        stmt = (
            select(CourseModel)
            .join(SessionModel, SessionModel.course_id == CourseModel.id)
            .join(EnrollmentModel, EnrollmentModel.session_id == SessionModel.id)
            .where(EnrollmentModel.user_id == user_id)
            .order_by(EnrollmentModel.id)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def delete_for_user_in_sessions(
        self,
        session: AsyncSession,
        user_id: int,
        session_ids: list[int],
    ) -> int:
        """
        Delete a user's enrollments in the given sessions.

        Returns:
            Number of enrollment rows deleted
        """
        if not session_ids:
            return 0
        stmt = delete(EnrollmentModel).where(
            EnrollmentModel.user_id == user_id,
            EnrollmentModel.session_id.in_(session_ids),
        )
        result = await session.execute(stmt)
        return result.rowcount

    async def delete_in_sessions(self, session: AsyncSession, session_ids: list[int]) -> int:
        """
        Delete every enrollment (any user) in the given sessions.

        Returns:
            Number of enrollment rows deleted
        """
        if not session_ids:
            return 0
        stmt = delete(EnrollmentModel).where(EnrollmentModel.session_id.in_(session_ids))
        result = await session.execute(stmt)
        return result.rowcount


enrollment_crud = EnrollmentCRUD()
