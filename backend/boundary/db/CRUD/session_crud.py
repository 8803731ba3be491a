"""
Session CRUD operations.

Provides Create, Read, Update, Delete operations for SessionModel
with course- and owner-scoped queries.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Session persistence operations
"""

from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.models.enrollment_model import EnrollmentModel
from backend.boundary.db.models.session_model import SessionModel
from backend.boundary.db.CRUD.base_crud import BaseCRUD


class SessionCRUD(BaseCRUD[SessionModel]):
    """
    CRUD operations for SessionModel.

    Extends BaseCRUD with session-specific queries.
    """

    def __init__(self) -> None:
        """Initialize SessionCRUD with SessionModel."""
        super().__init__(SessionModel)

    async def get_by_course(
        self,
        session: AsyncSession,
        course_id: int,
    ) -> Sequence[SessionModel]:
        """
        Retrieve all sessions for a course, ordered by id.

        Args:
            session: Async database session
            course_id: Course id

        Returns:
            Sequence of SessionModels for the course
        """
        stmt = select(SessionModel).where(SessionModel.course_id == course_id).order_by(SessionModel.id)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_ids_by_course(self, session: AsyncSession, course_id: int) -> list[int]:
        """Retrieve ids of every session under a course, ordered by id."""
        stmt = select(SessionModel.id).where(SessionModel.course_id == course_id).order_by(SessionModel.id)
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def get_first_for_user_and_course(
        self,
        session: AsyncSession,
        user_id: int,
        course_id: int,
    ) -> SessionModel | None:
        """
        Retrieve the oldest session owned by a user under a course.

        Args:
            session: Async database session
            user_id: Owning user id
            course_id: Course id

        Returns:
            SessionModel if one exists, None otherwise
        """
        stmt = (
            select(SessionModel)
            .where(SessionModel.user_id == user_id, SessionModel.course_id == course_id)
            .order_by(SessionModel.id)
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_first_for_user(self, session: AsyncSession, user_id: int) -> SessionModel | None:
        """Retrieve the oldest session owned by a user under any course."""
        stmt = select(SessionModel).where(SessionModel.user_id == user_id).order_by(SessionModel.id).limit(1)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_enrolled_ids_for_user_and_course(
        self,
        session: AsyncSession,
        user_id: int,
        course_id: int,
    ) -> list[int]:
        """
        Retrieve ids of course sessions the user holds an enrollment in.

        Single joined query over session and enrollment.

        Args:
            session: Async database session
            user_id: Enrolled user id
            course_id: Course id

        Returns:
            list[int]: Distinct session ids, ordered
        """
        stmt = (
            select(SessionModel.id)
            .join(EnrollmentModel, EnrollmentModel.session_id == SessionModel.id)
            .where(SessionModel.course_id == course_id, EnrollmentModel.user_id == user_id)
            .distinct()
            .order_by(SessionModel.id)
        )
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def delete_many(self, session: AsyncSession, ids: list[int]) -> int:
        """
        Delete several sessions by id.

        Args:
            session: Async database session
            ids: Session ids

        Returns:
            Number of sessions deleted
        """
        if not ids:
            return 0
        stmt = delete(SessionModel).where(SessionModel.id.in_(ids))
        result = await session.execute(stmt)
        return result.rowcount


session_crud = SessionCRUD()
