"""
Video service orchestrator.

Lecture video metadata. Uploaded videos are attached to the uploader's
first session; each course also owns a primary video row created with it.

Dependencies: backend.boundary.db.CRUD
System role: Video use case orchestration
"""

import logging
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from backend.application.services.identity_service import IdentityService
from backend.boundary.db.CRUD.session_crud import session_crud
from backend.boundary.db.CRUD.video_crud import video_crud
from backend.boundary.db.models.video_model import VideoModel
from backend.boundary.db.transaction import database_errors, transaction
from backend.core.exceptions import (
    CourseNotFoundError,
    SessionNotFoundError,
    ValidationError,
    VideoNotFoundError,
)

logger = logging.getLogger(__name__)


def video_to_dict(video: VideoModel) -> dict:
    """Serialize a video row."""
    return {
        "id": video.id,
        "session_id": video.session_id,
        "title": video.title,
        "url": video.url,
        "duration": video.duration,
        "description": video.description,
        "upload_date": video.upload_date,
    }


class VideoService:
    """Video service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize video service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db
        self.identity = IdentityService(db)

    async def get_video(self, video_id: int) -> dict:
        """
        Get video by ID.

        Raises:
            VideoNotFoundError: If video not found
        """
        async with database_errors("get_video"):
            video = await video_crud.get_by_id(self.db, video_id)
        if video is None:
            raise VideoNotFoundError(video_id)
        return video_to_dict(video)

    async def video_exists(self, video_id: int) -> bool:
        async with database_errors("video_exists"):
            return await video_crud.exists(self.db, video_id)

    async def get_video_url_by_course(self, course_id: int) -> str:
        """
        Get the primary video URL of a course.

        Returns:
            str: Stored URL (empty until one is set)

        Raises:
            CourseNotFoundError: If course not found
        """
        async with database_errors("get_video_url_by_course"):
            video = await video_crud.get_for_course(self.db, course_id)
        if video is None:
            raise CourseNotFoundError(course_id)
        return video.url

    async def upload_video(
        self,
        username: str,
        title: str | None,
        url: str,
        duration: int | None = None,
        description: str | None = None,
        upload_date: datetime | None = None,
    ) -> dict:
        """
        Store video metadata under the uploader's first session.

        Args:
            username: Uploader username
            title: Video title
            url: Stored video path or URL
            duration: Duration in seconds
            description: Video description
            upload_date: Upload timestamp

        Returns:
            dict: Persisted video

        Raises:
            IdentityNotFoundError: Username unknown
            SessionNotFoundError: Uploader owns no session
        """
        async with transaction(self.db, "upload_video"):
            user_id = await self.identity.resolve(username)
            session = await session_crud.get_first_for_user(self.db, user_id)
            if session is None:
                raise SessionNotFoundError(details={"username": username})

            video = await video_crud.create(
                self.db,
                session_id=session.id,
                title=title,
                url=url,
                duration=duration,
                description=description,
                upload_date=upload_date,
            )

        logger.info(
            "Video uploaded",
            extra={"video_id": video.id, "session_id": session.id, "username": username},
        )
        return video_to_dict(video)

    async def delete_video(self, video_id: int) -> bool:
        """
        Delete an uploaded video.

        A course's primary video cannot be deleted on its own.

        Returns:
            bool: True if a row was deleted

        Raises:
            ValidationError: Video is a course's primary video
        """
        async with transaction(self.db, "delete_video"):
            if await video_crud.is_course_primary(self.db, video_id):
                raise ValidationError(
                    "Video is the primary video of a course",
                    field="video_id",
                    details={"video_id": video_id},
                )
            deleted = await video_crud.delete_by_id(self.db, video_id)

        logger.info("Video deleted", extra={"video_id": video_id, "deleted": deleted})
        return deleted > 0
