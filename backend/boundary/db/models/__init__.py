"""
Database models package.

Exports:
  - UserModel: Account ORM model
  - CourseModel: Course ORM model
  - SessionModel: Session ORM model
  - EnrollmentModel, EnrollmentStatus: Enrollment ORM model and status enum
  - VideoModel: Video ORM model
  - CommentModel: Comment ORM model
  - ContactModel: Contact message ORM model

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Database model definitions for domain entities
"""

from backend.boundary.db.models.user_model import UserModel
from backend.boundary.db.models.video_model import VideoModel
from backend.boundary.db.models.course_model import CourseModel
from backend.boundary.db.models.session_model import SessionModel
from backend.boundary.db.models.enrollment_model import EnrollmentModel, EnrollmentStatus
from backend.boundary.db.models.comment_model import CommentModel
from backend.boundary.db.models.contact_model import ContactModel

__all__ = [
    "UserModel",
    "VideoModel",
    "CourseModel",
    "SessionModel",
    "EnrollmentModel",
    "EnrollmentStatus",
    "CommentModel",
    "ContactModel",
]
