"""
Course service orchestrator.

Coordinates course lifecycle operations: creation together with the
primary video placeholder, edits, search, and deletion with comment
cleanup.

Dependencies: backend.boundary.db.CRUD, backend.boundary.db.models
System role: Course use case orchestration
"""

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from backend.application.services.identity_service import IdentityService
from backend.boundary.db.CRUD.comment_crud import comment_crud
from backend.boundary.db.CRUD.course_crud import course_crud
from backend.boundary.db.CRUD.video_crud import video_crud
from backend.boundary.db.models.course_model import CourseModel
from backend.boundary.db.transaction import database_errors, transaction
from backend.core.exceptions import CourseHasSessionsError, CourseNotFoundError

logger = logging.getLogger(__name__)


def course_to_dict(course: CourseModel, video_url: str | None = None) -> dict:
    """
    Serialize a course row.

    Args:
        course: CourseModel instance
        video_url: Primary video URL, included when known

    Returns:
        dict: Course fields (plus video_url when given)
    """
    data = {
        "id": course.id,
        "name": course.name,
        "description": course.description,
        "image": course.image,
        "user_id": course.user_id,
        "video_id": course.video_id,
        "created_at": course.created_at,
        "updated_at": course.updated_at,
    }
    if video_url is not None:
        data["video_url"] = video_url
    return data


@dataclass
class CourseUpdateResult:
    """
    Outcome of a course edit.

    Attributes:
        updated: Course rows affected
        previous_image: Image filename before the edit; the caller replaces
            the stored file
        course: Course data after the edit
    """

    updated: int
    previous_image: str | None
    course: dict


class CourseService:
    """Course service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize course service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db
        self.identity = IdentityService(db)

    async def create_course(
        self,
        name: str,
        description: str | None,
        image: str | None,
        owner_username: str,
    ) -> dict:
        """
        Create a course and its empty primary video in one transaction.

        Args:
            name: Course name
            description: Course description
            image: Stored image filename
            owner_username: Username of the instructor

        Returns:
            dict: Persisted course row, including video_url

        Raises:
            IdentityNotFoundError: Owner username unknown
            DatabaseError: Either insert failed (nothing is kept)
        """
        async with transaction(self.db, "create_course"):
            user_id = await self.identity.resolve(owner_username)
            video = await video_crud.create(self.db, url="")
            course = await course_crud.create(
                self.db,
                name=name,
                description=description,
                image=image,
                user_id=user_id,
                video_id=video.id,
            )

        logger.info(
            "Course created",
            extra={"course_id": course.id, "course_name": name, "owner": owner_username},
        )
        return course_to_dict(course, video_url=video.url)

    async def course_exists(self, course_id: int) -> bool:
        """
        Check whether a course row exists.

        Used as a gate before any write that references a course id.
        A failing query raises instead of reporting False.

        Args:
            course_id: Course id

        Returns:
            bool: True if the course exists

        Raises:
            DatabaseError: Existence could not be determined
        """
        async with database_errors("course_exists"):
            return await course_crud.exists(self.db, course_id)

    async def get_course(self, course_id: int) -> dict:
        """
        Get course by ID, with its primary video URL.

        Args:
            course_id: Course id

        Returns:
            dict: Course data

        Raises:
            CourseNotFoundError: If course not found
        """
        async with database_errors("get_course"):
            course = await course_crud.get_with_video(self.db, course_id)

        if course is None:
            raise CourseNotFoundError(course_id)

        return course_to_dict(course, video_url=course.video.url if course.video else "")

    async def get_course_summary(self, course_id: int) -> tuple[str, str | None]:
        """
        Get the name and description of a course.

        Raises:
            CourseNotFoundError: If course not found
        """
        async with database_errors("get_course_summary"):
            course = await course_crud.get_by_id(self.db, course_id)
        if course is None:
            raise CourseNotFoundError(course_id)
        return course.name, course.description

    async def get_all_courses(
        self,
        limit: int | None = None,
        offset: int = 0
    ) -> list[dict]:
        """
        Get all courses with pagination.

        Args:
            limit: Maximum number of courses to return
            offset: Number of courses to skip

        Returns:
            list[dict]: List of course dicts
        """
        async with database_errors("get_all_courses"):
            courses = await course_crud.get_all(self.db, limit=limit, offset=offset)
        return [course_to_dict(c) for c in courses]

    async def get_courses_by_owner(self, username: str) -> list[dict]:
        """
        Get the courses a user created.

        Raises:
            IdentityNotFoundError: Username unknown
        """
        user_id = await self.identity.resolve(username)
        async with database_errors("get_courses_by_owner"):
            courses = await course_crud.get_by_owner(self.db, user_id)
        return [course_to_dict(c) for c in courses]

    async def search_by_name(self, fragment: str) -> list[dict]:
        """
        Case-insensitive substring search over course names.

        Args:
            fragment: Text to look for

        Returns:
            list[dict]: Matching courses; empty when nothing matches
        """
        async with database_errors("search_courses"):
            courses = await course_crud.search_by_name(self.db, fragment)

        logger.info(
            "Course search",
            extra={"query": fragment, "count": len(courses)},
        )
        return [course_to_dict(c) for c in courses]

    async def update_course(
        self,
        course_id: int,
        name: str,
        description: str | None,
        image: str | None = None,
        video_url: str | None = None,
    ) -> CourseUpdateResult:
        """
        Update a course and its primary video URL in one transaction.

        Args:
            course_id: Course id
            name: New course name
            description: New course description
            image: New image filename (None keeps the current one)
            video_url: New primary video URL (None keeps the current one)

        Returns:
            CourseUpdateResult: Affected rows, previous image, updated course

        Raises:
            CourseNotFoundError: If course not found
            DatabaseError: Any update failed (nothing is kept)
        """
        async with transaction(self.db, "update_course"):
            course = await course_crud.get_by_id(self.db, course_id)
            if course is None:
                raise CourseNotFoundError(course_id)

            previous_image = course.image

            if video_url is not None:
                await video_crud.update_by_id(self.db, course.video_id, url=video_url)

            values = {"name": name, "description": description}
            if image is not None:
                values["image"] = image
            updated = await course_crud.update_by_id(self.db, course_id, **values)

        logger.info(
            "Course updated",
            extra={
                "course_id": course_id,
                "image_replaced": image is not None,
                "video_replaced": video_url is not None,
            },
        )

        return CourseUpdateResult(
            updated=updated,
            previous_image=previous_image,
            course=await self.get_course(course_id),
        )

    async def delete_course(self, course_id: int) -> bool:
        """
        Delete a course after deleting its comments.

        Sessions, enrollments and the primary video are not cascaded;
        a course that sessions still reference is rejected.

        Args:
            course_id: Course id

        Returns:
            bool: True if deleted

        Raises:
            CourseNotFoundError: If course not found
            CourseHasSessionsError: Sessions still reference the course
        """
        async with transaction(self.db, "delete_course"):
            if not await course_crud.exists(self.db, course_id):
                raise CourseNotFoundError(course_id)

            session_count = await course_crud.count_sessions(self.db, course_id)
            if session_count:
                raise CourseHasSessionsError(course_id, session_count)

            comments_deleted = await comment_crud.delete_by_course(self.db, course_id)
            await course_crud.delete_by_id(self.db, course_id)

        logger.info(
            "Course deleted",
            extra={"course_id": course_id, "comments_deleted": comments_deleted},
        )
        return True
