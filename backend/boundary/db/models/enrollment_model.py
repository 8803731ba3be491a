"""
Enrollment ORM model.

Links a user to a session with a date and status. There is no uniqueness
constraint on (user_id, session_id): repeated enroll calls produce
duplicate rows.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Enrollment persistence
"""

import enum
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from backend.boundary.db.base import Base, IntegerIDMixin


class EnrollmentStatus(str, enum.Enum):
    """
    Enrollment record states.

    ENROLLED: User holds a place in the session
    """

    ENROLLED = "enrolled"


class EnrollmentModel(Base, IntegerIDMixin):
    """
    Enrollment ORM model.

    Attributes:
        id: Integer primary key (auto-generated)
        user_id: Enrolled user
        session_id: Session the user is enrolled in (must exist)
        date: Enrollment timestamp (UTC)
        status: EnrollmentStatus value stored as text
    """

    __tablename__ = "enrollment"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )
    session_id: Mapped[int] = mapped_column(
        ForeignKey("session.id"),
        nullable=False,
        index=True,
    )
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    status: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default=EnrollmentStatus.ENROLLED.value,
    )
