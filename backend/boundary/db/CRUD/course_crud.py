"""
Course CRUD operations.

Provides Create, Read, Update, Delete operations for CourseModel
with course-specific query methods.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Course persistence operations
"""

from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from backend.boundary.db.models.course_model import CourseModel
from backend.boundary.db.models.session_model import SessionModel
from backend.boundary.db.CRUD.base_crud import BaseCRUD


class CourseCRUD(BaseCRUD[CourseModel]):
    """
    CRUD operations for CourseModel.

    Extends BaseCRUD with course-specific queries including
    eager loading of the primary video.
    """

    def __init__(self) -> None:
        """Initialize CourseCRUD with CourseModel."""
        super().__init__(CourseModel)

    async def get_with_video(
        self,
        session: AsyncSession,
        id: int,
    ) -> CourseModel | None:
        """
        Retrieve course with eagerly loaded primary video.

        Args:
            session: Async database session
            id: Course id

        Returns:
            CourseModel with video loaded, None if not found
        """
        stmt = (
            select(CourseModel)
            .where(CourseModel.id == id)
            .options(selectinload(CourseModel.video))
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def search_by_name(
        self,
        session: AsyncSession,
        fragment: str,
    ) -> Sequence[CourseModel]:
        """
        Case-insensitive substring search on course name.

        Args:
            session: Async database session
            fragment: Substring to look for

        Returns:
            Sequence of matching CourseModels (possibly empty)
        """
        stmt = (
            select(CourseModel)
            .where(CourseModel.name.icontains(fragment, autoescape=True))
            .order_by(CourseModel.id)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_by_owner(
        self,
        session: AsyncSession,
        user_id: int,
    ) -> Sequence[CourseModel]:
        """
        Retrieve all courses owned by a user.

        Args:
            session: Async database session
            user_id: Owner id

        Returns:
            Sequence of CourseModels
        """
        stmt = select(CourseModel).where(CourseModel.user_id == user_id).order_by(CourseModel.id)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_sessions(self, session: AsyncSession, course_id: int) -> int:
        """Count sessions that reference a course."""
        stmt = select(func.count()).select_from(SessionModel).where(SessionModel.course_id == course_id)
        result = await session.execute(stmt)
        return result.scalar_one()


course_crud = CourseCRUD()
