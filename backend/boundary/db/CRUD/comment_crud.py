"""
Comment CRUD operations.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Comment persistence operations
"""

from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.models.comment_model import CommentModel
from backend.boundary.db.CRUD.base_crud import BaseCRUD


class CommentCRUD(BaseCRUD[CommentModel]):
    """CRUD operations for CommentModel."""

    def __init__(self) -> None:
        """Initialize CommentCRUD with CommentModel."""
        super().__init__(CommentModel)

    async def get_by_course(self, session: AsyncSession, course_id: int) -> Sequence[CommentModel]:
        """Retrieve every comment of a course, oldest first."""
        stmt = select(CommentModel).where(CommentModel.course_id == course_id).order_by(CommentModel.id)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def exists_for_user_and_course(
        self,
        session: AsyncSession,
        user_id: int,
        course_id: int,
    ) -> bool:
        """Check whether a user has commented on a course."""
        stmt = (
            select(CommentModel.id)
            .where(CommentModel.user_id == user_id, CommentModel.course_id == course_id)
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def delete_by_course(self, session: AsyncSession, course_id: int) -> int:
        """
        Delete every comment of a course.

        Returns:
            Number of comments deleted
        """
        stmt = delete(CommentModel).where(CommentModel.course_id == course_id)
        result = await session.execute(stmt)
        return result.rowcount

    async def delete_for_user(
        self,
        session: AsyncSession,
        comment_id: int,
        user_id: int,
        course_id: int | None = None,
    ) -> int:
        """
        Delete a comment only if the given user wrote it.

        With course_id set, the comment must also belong to that course.

        Returns:
            Number of comments deleted (0 or 1)
        """
        stmt = delete(CommentModel).where(CommentModel.id == comment_id, CommentModel.user_id == user_id)
        if course_id is not None:
            stmt = stmt.where(CommentModel.course_id == course_id)
        result = await session.execute(stmt)
        return result.rowcount


comment_crud = CommentCRUD()
