"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from backend.boundary.db.CRUD import course_crud, session_crud

    # Use singleton instances
    course = await course_crud.get_by_id(db, course_id)

    # Or instantiate classes directly for custom behavior
    from backend.boundary.db.CRUD import SessionCRUD
    custom_crud = SessionCRUD()
"""

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.CRUD.user_crud import UserCRUD, user_crud
from backend.boundary.db.CRUD.course_crud import CourseCRUD, course_crud
from backend.boundary.db.CRUD.session_crud import SessionCRUD, session_crud
from backend.boundary.db.CRUD.enrollment_crud import EnrollmentCRUD, enrollment_crud
from backend.boundary.db.CRUD.video_crud import VideoCRUD, video_crud
from backend.boundary.db.CRUD.comment_crud import CommentCRUD, comment_crud
from backend.boundary.db.CRUD.contact_crud import ContactCRUD, contact_crud

__all__ = [
    "BaseCRUD",
    "UserCRUD",
    "user_crud",
    "CourseCRUD",
    "course_crud",
    "SessionCRUD",
    "session_crud",
    "EnrollmentCRUD",
    "enrollment_crud",
    "VideoCRUD",
    "video_crud",
    "CommentCRUD",
    "comment_crud",
    "ContactCRUD",
    "contact_crud",
]
