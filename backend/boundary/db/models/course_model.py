"""
Course ORM model.

Represents a course offered by an instructor. Every course owns exactly
one primary video row used for the course page video URL.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Course persistence
"""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class CourseModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Course ORM model.

    Deleting a course removes its comments explicitly in the service layer;
    sessions, enrollments and the primary video are not cascaded.

    Attributes:
        id: Integer primary key (auto-generated)
        name: Course name (255 char limit)
        description: Optional course description (up to 4096 chars)
        image: Stored image filename (opaque to this layer)
        user_id: Owning instructor
        video_id: Primary video row
        created_at: Course creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)

    Relationships:
        video: Many-to-one with VideoModel (primary video)
    """

    __tablename__ = "course"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        doc="Course name",
    )

    description: Mapped[str | None] = mapped_column(
        String(4096),
        nullable=True,
        default=None,
        doc="Course description",
    )

    image: Mapped[str | None] = mapped_column(
        String(512),
        nullable=True,
        default=None,
        doc="Course image filename",
    )

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"),
        nullable=False,
        index=True,
        doc="Owning user ID",
    )

    video_id: Mapped[int] = mapped_column(
        ForeignKey("video.id"),
        nullable=False,
        doc="Primary video ID",
    )

    # Relationships
    video = relationship("VideoModel", foreign_keys=[video_id])
