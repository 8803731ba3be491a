"""
Exception hierarchy for the course platform.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class CoursePlatformException(Exception):
    """Base exception for all course platform errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(CoursePlatformException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class IdentityNotFoundError(CoursePlatformException):
    """Raised when a username (or user id) does not resolve to a user row."""

    def __init__(self, username: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize identity not found error.

        Args:
            username: Username (or stringified user id) that failed to resolve
            details: Additional context
        """
        details = details or {}
        details["username"] = username
        super().__init__(f"User not found: {username}", details)


class UserNotFoundError(CoursePlatformException):
    """Raised when a user id does not exist."""

    def __init__(self, user_id: int, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["user_id"] = user_id
        super().__init__(f"User with ID {user_id} not found", details)


class UserAlreadyExistsError(CoursePlatformException):
    """Raised when a username or email is already registered."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(
            f"A user with this {field} already exists",
            {"field": field, "value": value},
        )


class UserInUseError(CoursePlatformException):
    """Raised when deleting a user that still owns dependent rows."""

    def __init__(self, user_id: int, dependents: dict[str, int]) -> None:
        """
        Initialize user in use error.

        Args:
            user_id: ID of the user that cannot be deleted
            dependents: Table name to row count for rows still referencing the user
        """
        super().__init__(
            f"User with ID {user_id} still has dependent records",
            {"user_id": user_id, "dependents": dependents},
        )


class AuthenticationError(CoursePlatformException):
    """Raised when credentials or an access token are rejected."""

    pass


class CourseNotFoundError(CoursePlatformException):
    """Raised when a course cannot be found."""

    def __init__(self, course_id: int, details: dict[str, Any] | None = None) -> None:
        """
        Initialize course not found error.

        Args:
            course_id: ID of the missing course
            details: Additional context
        """
        details = details or {}
        details["course_id"] = course_id
        super().__init__(f"Course not found with ID: {course_id}", details)


class CourseHasSessionsError(CoursePlatformException):
    """Raised when deleting a course that sessions still reference."""

    def __init__(self, course_id: int, session_count: int) -> None:
        super().__init__(
            f"Course {course_id} still has {session_count} session(s)",
            {"course_id": course_id, "session_count": session_count},
        )


class SessionNotFoundError(CoursePlatformException):
    """Raised when a session cannot be found."""

    def __init__(self, session_id: int | None = None, details: dict[str, Any] | None = None) -> None:
        """
        Initialize session not found error.

        Args:
            session_id: ID of the missing session (None when looked up by owner)
            details: Additional context
        """
        details = details or {}
        if session_id is not None:
            details["session_id"] = session_id
            message = f"Session not found: {session_id}"
        else:
            message = "Session not found"
        super().__init__(message, details)


class NoSessionsFoundError(CoursePlatformException):
    """Raised when a withdrawal finds no sessions for the (user, course) pair."""

    def __init__(self, username: str, course_id: int) -> None:
        super().__init__(
            "No sessions found for this user and course",
            {"username": username, "course_id": course_id},
        )


class CommentNotFoundError(CoursePlatformException):
    """Raised when a comment cannot be found."""

    def __init__(self, comment_id: int) -> None:
        super().__init__(f"Comment not found: {comment_id}", {"comment_id": comment_id})


class VideoNotFoundError(CoursePlatformException):
    """Raised when a video cannot be found."""

    def __init__(self, video_id: int) -> None:
        super().__init__(f"Video not found: {video_id}", {"video_id": video_id})


class DatabaseError(CoursePlatformException):
    """Raised when an underlying query fails. Wraps the driver/ORM error."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize database error.

        Args:
            message: Error message
            operation: Service operation that failed (enroll, withdraw, ...)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
