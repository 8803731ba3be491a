"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, IntegerIDMixin, TimestampMixin: Model building blocks
  - Database, get_database(), get_async_db(): Connection pool and session injection
  - transaction(), database_errors(): Unit-of-work helpers
  - UserModel, CourseModel, SessionModel, EnrollmentModel, VideoModel,
    CommentModel, ContactModel: Domain entities
  - *_crud: CRUD operation singletons

Dependencies: sqlalchemy, backend.configs
System role: Database adapter providing persistent storage for users,
courses, sessions, enrollments, videos, comments and contact messages.
"""

from backend.boundary.db.base import Base, IntegerIDMixin, TimestampMixin
from backend.boundary.db.connection import Database, get_async_db, get_database
from backend.boundary.db.transaction import database_errors, transaction
from backend.boundary.db.models import (
    CommentModel,
    ContactModel,
    CourseModel,
    EnrollmentModel,
    EnrollmentStatus,
    SessionModel,
    UserModel,
    VideoModel,
)
from backend.boundary.db.CRUD import (
    BaseCRUD,
    comment_crud,
    contact_crud,
    course_crud,
    enrollment_crud,
    session_crud,
    user_crud,
    video_crud,
)

__all__ = [
    # Base classes
    "Base",
    "IntegerIDMixin",
    "TimestampMixin",
    # Connection
    "Database",
    "get_async_db",
    "get_database",
    "transaction",
    "database_errors",
    # Models
    "UserModel",
    "CourseModel",
    "SessionModel",
    "EnrollmentModel",
    "EnrollmentStatus",
    "VideoModel",
    "CommentModel",
    "ContactModel",
    # CRUD
    "BaseCRUD",
    "user_crud",
    "course_crud",
    "session_crud",
    "enrollment_crud",
    "video_crud",
    "comment_crud",
    "contact_crud",
]
