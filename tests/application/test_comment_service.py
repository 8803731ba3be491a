"""
Tests for CommentService.
"""

import pytest

from backend.application.services.comment_service import CommentService
from backend.application.services.course_service import CourseService
from backend.core.exceptions import CourseNotFoundError, IdentityNotFoundError


@pytest.fixture
def comment_service(test_async_db) -> CommentService:
    return CommentService(test_async_db)


@pytest.fixture
async def course(test_async_db, seeded_users) -> dict:
    return await CourseService(test_async_db).create_course("Algorithms", None, None, "alice")


class TestComments:
    """Post, list and delete course comments."""

    @pytest.mark.asyncio
    async def test_add_and_list_comments(self, comment_service, course, seeded_users) -> None:
        # Act
        first = await comment_service.add_comment("bob", course["id"], "Great course")
        await comment_service.add_comment("alice", course["id"], "Thanks!")

        # Assert
        comments = await comment_service.get_comments(course["id"])
        assert [c["text"] for c in comments] == ["Great course", "Thanks!"]
        assert first["user_id"] == seeded_users["bob"]
        assert await comment_service.comment_exists(seeded_users["bob"], course["id"]) is True

    @pytest.mark.asyncio
    async def test_add_comment_missing_course(self, comment_service, seeded_users) -> None:
        with pytest.raises(CourseNotFoundError):
            await comment_service.add_comment("bob", 404, "Hello?")

    @pytest.mark.asyncio
    async def test_add_comment_unknown_user(self, comment_service, course) -> None:
        with pytest.raises(IdentityNotFoundError):
            await comment_service.add_comment("mallory", course["id"], "spam")

    @pytest.mark.asyncio
    async def test_only_author_can_delete(self, comment_service, course, seeded_users) -> None:
        # Arrange
        comment = await comment_service.add_comment("bob", course["id"], "Great course")

        # Act
        by_other = await comment_service.delete_comment(comment["id"], "alice")
        by_author = await comment_service.delete_comment(comment["id"], "bob")

        # Assert
        assert by_other is False
        assert by_author is True
        assert await comment_service.comment_exists(seeded_users["bob"], course["id"]) is False

    @pytest.mark.asyncio
    async def test_delete_scoped_to_course(self, comment_service, course, test_async_db, seeded_users) -> None:
        # Arrange
        other = await CourseService(test_async_db).create_course("Databases", None, None, "alice")
        comment = await comment_service.add_comment("bob", course["id"], "Great course")

        # Act
        wrong_course = await comment_service.delete_comment(comment["id"], "bob", course_id=other["id"])
        right_course = await comment_service.delete_comment(comment["id"], "bob", course_id=course["id"])

        # Assert
        assert wrong_course is False
        assert right_course is True
        assert await comment_service.get_comments(course["id"]) == []
