"""
Core domain module.

Contains the exception hierarchy and token primitives shared by every
layer. Business orchestration lives in backend.application.services.
"""

from backend.core.exceptions import (
    CoursePlatformException,
    ValidationError,
    IdentityNotFoundError,
    UserNotFoundError,
    UserAlreadyExistsError,
    UserInUseError,
    AuthenticationError,
    CourseNotFoundError,
    CourseHasSessionsError,
    SessionNotFoundError,
    NoSessionsFoundError,
    CommentNotFoundError,
    VideoNotFoundError,
    DatabaseError,
)

__all__ = [
    "CoursePlatformException",
    "ValidationError",
    "IdentityNotFoundError",
    "UserNotFoundError",
    "UserAlreadyExistsError",
    "UserInUseError",
    "AuthenticationError",
    "CourseNotFoundError",
    "CourseHasSessionsError",
    "SessionNotFoundError",
    "NoSessionsFoundError",
    "CommentNotFoundError",
    "VideoNotFoundError",
    "DatabaseError",
]
