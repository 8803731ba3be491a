"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    CurrentUser,
    get_comment_service,
    get_contact_service,
    get_course_service,
    get_current_user,
    get_enrollment_service,
    get_identity_service,
    get_optional_current_user,
    get_session_service,
    get_settings_dependency,
    get_user_service,
    get_video_service,
)

__all__ = [
    "CurrentUser",
    "get_comment_service",
    "get_contact_service",
    "get_course_service",
    "get_current_user",
    "get_enrollment_service",
    "get_identity_service",
    "get_optional_current_user",
    "get_session_service",
    "get_settings_dependency",
    "get_user_service",
    "get_video_service",
]
