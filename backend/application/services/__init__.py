"""Service orchestrators."""

from .comment_service import CommentService
from .contact_service import ContactService
from .course_service import CourseService, CourseUpdateResult
from .enrollment_service import EnrollmentService
from .identity_service import IdentityService
from .session_service import SessionService
from .user_service import UserService
from .video_service import VideoService

__all__ = [
    "CommentService",
    "ContactService",
    "CourseService",
    "CourseUpdateResult",
    "EnrollmentService",
    "IdentityService",
    "SessionService",
    "UserService",
    "VideoService",
]
