"""
Video ORM model.

Dual use: a course's primary video is a row referenced from
course.video_id (created empty with the course); uploaded lecture videos
hang off a session through session_id.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Video metadata persistence
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from backend.boundary.db.base import Base, IntegerIDMixin


class VideoModel(Base, IntegerIDMixin):
    """
    Video ORM model.

    Attributes:
        id: Integer primary key (auto-generated)
        session_id: Owning session for uploaded videos (NULL for primary videos)
        title: Optional title
        url: Stored video path or URL (empty string for a fresh placeholder)
        duration: Optional duration in seconds
        description: Optional description
        upload_date: Optional upload timestamp
    """

    __tablename__ = "video"

    # No FK: course -> video and session -> course would close a cycle.
    # The session service clears this column before deleting a session.
    session_id: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        default=None,
        index=True,
    )
    title: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    url: Mapped[str] = mapped_column(String(1024), nullable=False, default="")
    duration: Mapped[int | None] = mapped_column(Integer, nullable=True, default=None)
    description: Mapped[str | None] = mapped_column(String(4096), nullable=True, default=None)
    upload_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )
