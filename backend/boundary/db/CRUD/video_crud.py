"""
Video CRUD operations.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Video persistence operations
"""

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.models.course_model import CourseModel
from backend.boundary.db.models.video_model import VideoModel
from backend.boundary.db.CRUD.base_crud import BaseCRUD


class VideoCRUD(BaseCRUD[VideoModel]):
    """CRUD operations for VideoModel."""

    def __init__(self) -> None:
        """Initialize VideoCRUD with VideoModel."""
        super().__init__(VideoModel)

    async def get_for_course(self, session: AsyncSession, course_id: int) -> VideoModel | None:
        """
        Retrieve the primary video of a course.

        Args:
            session: Async database session
            course_id: Course id

        Returns:
            VideoModel if the course exists, None otherwise
        """
        stmt = (
            select(VideoModel)
            .join(CourseModel, CourseModel.video_id == VideoModel.id)
            .where(CourseModel.id == course_id)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def detach_from_sessions(self, session: AsyncSession, session_ids: list[int]) -> int:
        """
        Clear session_id on videos attached to the given sessions.

        Returns:
            Number of videos detached
        """
        if not session_ids:
            return 0
        stmt = (
            update(VideoModel)
            .where(VideoModel.session_id.in_(session_ids))
            .values(session_id=None)
        )
        result = await session.execute(stmt)
        return result.rowcount

    async def is_course_primary(self, session: AsyncSession, video_id: int) -> bool:
        """Check whether any course uses this video as its primary video."""
        stmt = select(CourseModel.id).where(CourseModel.video_id == video_id).limit(1)
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None


video_crud = VideoCRUD()
