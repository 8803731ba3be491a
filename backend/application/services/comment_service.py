"""
Comment service orchestrator.

Course discussion comments: post, list, and author-only deletion.

Dependencies: backend.boundary.db.CRUD
System role: Comment use case orchestration
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from backend.application.services.identity_service import IdentityService
from backend.boundary.db.CRUD.comment_crud import comment_crud
from backend.boundary.db.CRUD.course_crud import course_crud
from backend.boundary.db.models.comment_model import CommentModel
from backend.boundary.db.transaction import database_errors, transaction
from backend.core.exceptions import CourseNotFoundError

logger = logging.getLogger(__name__)


def comment_to_dict(comment: CommentModel) -> dict:
    """Serialize a comment row."""
    return {
        "id": comment.id,
        "user_id": comment.user_id,
        "course_id": comment.course_id,
        "text": comment.text,
        "created_at": comment.created_at,
    }


class CommentService:
    """Comment service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.identity = IdentityService(db)

    async def add_comment(self, username: str, course_id: int, text: str) -> dict:
        """
        Post a comment on a course.

        Args:
            username: Author username
            course_id: Course id
            text: Comment body

        Returns:
            dict: Persisted comment

        Raises:
            IdentityNotFoundError: Username unknown
            CourseNotFoundError: Course does not exist
        """
        async with transaction(self.db, "add_comment"):
            user_id = await self.identity.resolve(username)
            if not await course_crud.exists(self.db, course_id):
                raise CourseNotFoundError(course_id)
            comment = await comment_crud.create(
                self.db,
                user_id=user_id,
                course_id=course_id,
                text=text,
            )

        logger.info(
            "Comment added",
            extra={"comment_id": comment.id, "course_id": course_id, "username": username},
        )
        return comment_to_dict(comment)

    async def get_comments(self, course_id: int) -> list[dict]:
        """List a course's comments, oldest first."""
        async with database_errors("get_comments"):
            comments = await comment_crud.get_by_course(self.db, course_id)
        return [comment_to_dict(c) for c in comments]

    async def comment_exists(self, user_id: int, course_id: int) -> bool:
        async with database_errors("comment_exists"):
            return await comment_crud.exists_for_user_and_course(self.db, user_id, course_id)

    async def delete_comment(self, comment_id: int, username: str, course_id: int | None = None) -> bool:
        """
        Delete a comment written by the given user.

        Another user's comment is left untouched, as is a comment outside
        course_id when one is given.

        Returns:
            bool: True if a comment was deleted

        Raises:
            IdentityNotFoundError: Username unknown
        """
        async with transaction(self.db, "delete_comment"):
            user_id = await self.identity.resolve(username)
            deleted = await comment_crud.delete_for_user(self.db, comment_id, user_id, course_id)

        if deleted:
            logger.info("Comment deleted", extra={"comment_id": comment_id, "username": username})
        return deleted > 0
