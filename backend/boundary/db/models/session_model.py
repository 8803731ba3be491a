"""
Session ORM model.

A scheduled time slot for a course. The same table also stores the
personal enrollment slots materialized by the enrollment flow, owned by
the enrolling user.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Session persistence for course scheduling and enrollment
"""

from datetime import time

from sqlalchemy import ForeignKey, Time
from sqlalchemy.orm import Mapped, mapped_column

from backend.boundary.db.base import Base, IntegerIDMixin


class SessionModel(Base, IntegerIDMixin):
    """
    Session ORM model.

    Attributes:
        id: Integer primary key (auto-generated)
        course_id: Parent course (must exist)
        start_time: Time of day the session starts
        end_time: Time of day the session ends
        user_id: Owning user (instructor, or enrollee for personal slots)
    """

    __tablename__ = "session"

    course_id: Mapped[int] = mapped_column(
        ForeignKey("course.id"),
        nullable=False,
        index=True,
        doc="Parent course ID",
    )

    start_time: Mapped[time] = mapped_column(Time, nullable=False)
    end_time: Mapped[time] = mapped_column(Time, nullable=False)

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"),
        nullable=False,
        index=True,
        doc="Owning user ID",
    )
