"""
Caller-scoped API endpoints.

Routes:
- GET /me/courses - Courses the caller created
- GET /me/enrollments - Courses the caller is enrolled in, once per session

Dependencies: backend.application.services, backend.models
System role: Personal dashboard HTTP API
"""

from fastapi import APIRouter, Depends

from backend.api.deps import (
    CurrentUser,
    get_course_service,
    get_current_user,
    get_enrollment_service,
)
from backend.api.routers.router_utils import handle_service_errors
from backend.application.services.course_service import CourseService
from backend.application.services.enrollment_service import EnrollmentService
from backend.models.course import CourseResponse

router = APIRouter(prefix="/me", tags=["me"])


@router.get("/courses", response_model=list[CourseResponse])
@handle_service_errors
async def my_courses(
    user: CurrentUser = Depends(get_current_user),
    course_service: CourseService = Depends(get_course_service),
) -> list[CourseResponse]:
    courses = await course_service.get_courses_by_owner(user.username)
    return [CourseResponse(**c) for c in courses]


@router.get("/enrollments", response_model=list[CourseResponse])
@handle_service_errors
async def my_enrollments(
    user: CurrentUser = Depends(get_current_user),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> list[CourseResponse]:
    """
    List the caller's enrolled courses.

    A course appears once for each of its sessions the caller is enrolled in.
    """
    courses = await enrollment_service.get_user_enrollments(user.username)
    return [CourseResponse(**c) for c in courses]
