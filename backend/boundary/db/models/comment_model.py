"""
Comment ORM model.

User comments shown on a course page.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Comment persistence
"""

from sqlalchemy import ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column

from backend.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class CommentModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Comment ORM model.

    Attributes:
        id: Integer primary key (auto-generated)
        user_id: Author
        course_id: Course the comment belongs to
        text: Comment body
    """

    __tablename__ = "comment"

    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    course_id: Mapped[int] = mapped_column(ForeignKey("course.id"), nullable=False, index=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)
