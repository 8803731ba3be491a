"""
Session service orchestrator.

Owns scheduled session records tied to a course and an owning user.
Callers gate writes with CourseService.course_exists; this service does
not re-check course existence.

Dependencies: backend.boundary.db.CRUD, backend.boundary.db.models
System role: Session use case orchestration
"""

import logging
from datetime import time

from sqlalchemy.ext.asyncio import AsyncSession

from backend.application.services.identity_service import IdentityService
from backend.boundary.db.CRUD.enrollment_crud import enrollment_crud
from backend.boundary.db.CRUD.session_crud import session_crud
from backend.boundary.db.CRUD.video_crud import video_crud
from backend.boundary.db.models.session_model import SessionModel
from backend.boundary.db.transaction import database_errors, transaction
from backend.core.exceptions import SessionNotFoundError

logger = logging.getLogger(__name__)


def session_to_dict(session: SessionModel) -> dict:
    """Serialize a session row."""
    return {
        "id": session.id,
        "course_id": session.course_id,
        "start_time": session.start_time,
        "end_time": session.end_time,
        "user_id": session.user_id,
    }


class SessionService:
    """Session service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize session service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db
        self.identity = IdentityService(db)

    async def create_session(
        self,
        course_id: int,
        start_time: time,
        end_time: time,
        owner_username: str,
    ) -> int:
        """
        Create a session owned by a user.

        Args:
            course_id: Parent course id (already verified by the caller)
            start_time: Start time of day
            end_time: End time of day
            owner_username: Username of the owner

        Returns:
            int: Created session id

        Raises:
            IdentityNotFoundError: Owner username unknown
        """
        async with transaction(self.db, "create_session"):
            user_id = await self.identity.resolve(owner_username)
            session = await session_crud.create(
                self.db,
                course_id=course_id,
                start_time=start_time,
                end_time=end_time,
                user_id=user_id,
            )

        logger.info(
            "Session created",
            extra={"session_id": session.id, "course_id": course_id, "owner": owner_username},
        )
        return session.id

    async def session_exists(self, session_id: int) -> bool:
        """
        Check whether a session row exists.

        Raises:
            DatabaseError: Existence could not be determined
        """
        async with database_errors("session_exists"):
            return await session_crud.exists(self.db, session_id)

    async def get_session(self, session_id: int) -> dict:
        """
        Get session by ID.

        Raises:
            SessionNotFoundError: If session not found
        """
        async with database_errors("get_session"):
            session = await session_crud.get_by_id(self.db, session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session_to_dict(session)

    async def update_session(
        self,
        session_id: int,
        course_id: int,
        start_time: time,
        end_time: time,
    ) -> int:
        """
        Update a session's course and times.

        The caller verifies both the session and the course beforehand.

        Returns:
            int: Rows affected; 0 means the session id did not match
        """
        async with transaction(self.db, "update_session"):
            updated = await session_crud.update_by_id(
                self.db,
                session_id,
                course_id=course_id,
                start_time=start_time,
                end_time=end_time,
            )

        logger.info("Session updated", extra={"session_id": session_id, "updated": updated})
        return updated

    async def delete_session_by_id(self, session_id: int) -> int:
        """
        Delete a session together with its enrollment rows.

        Uploaded videos attached to the session are kept and detached.

        Args:
            session_id: Session id

        Returns:
            int: Session rows deleted (0 when the id did not match)
        """
        async with transaction(self.db, "delete_session"):
            await video_crud.detach_from_sessions(self.db, [session_id])
            enrollments_deleted = await enrollment_crud.delete_in_sessions(self.db, [session_id])
            deleted = await session_crud.delete_by_id(self.db, session_id)

        logger.info(
            "Session deleted",
            extra={
                "session_id": session_id,
                "deleted": deleted,
                "enrollments_deleted": enrollments_deleted,
            },
        )
        return deleted

    async def get_sessions_by_course(self, course_id: int) -> list[dict]:
        """
        Get every session of a course.

        Args:
            course_id: Course id

        Returns:
            list[dict]: Session dicts (empty when the course has none)
        """
        async with database_errors("get_sessions_by_course"):
            sessions = await session_crud.get_by_course(self.db, course_id)
        return [session_to_dict(s) for s in sessions]
