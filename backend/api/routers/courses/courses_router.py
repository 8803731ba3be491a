"""
Course API endpoints.

Routes:
- POST /courses - Create new course
- GET /courses - List all courses
- GET /courses/search?name= - Search courses by name
- GET /courses/{id} - Get single course
- PUT /courses/{id} - Update course
- DELETE /courses/{id} - Delete course
- GET /courses/{id}/video - Get the course's primary video URL
- POST /courses/{id}/enroll - Enroll the caller
- POST /courses/{id}/withdraw - Withdraw the caller
- GET /courses/{id}/enrollment - Is the caller enrolled
- GET /courses/{id}/comments - List comments
- POST /courses/{id}/comments - Post a comment
- DELETE /courses/{id}/comments/{comment_id} - Delete own comment

Dependencies: backend.application.services, backend.models
System role: Course management HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from backend.api.deps.dependencies import (
    CurrentUser,
    get_comment_service,
    get_course_service,
    get_current_user,
    get_enrollment_service,
    get_video_service,
)
from backend.api.routers.router_utils import ensure_owner, handle_service_errors
from backend.application.services.comment_service import CommentService
from backend.application.services.course_service import CourseService
from backend.application.services.enrollment_service import EnrollmentService
from backend.application.services.video_service import VideoService
from backend.core.exceptions import CommentNotFoundError
from backend.models.comment import CommentResponse, CreateCommentRequest
from backend.models.course import (
    CourseResponse,
    CourseUpdateResponse,
    CourseVideoResponse,
    CreateCourseRequest,
    UpdateCourseRequest,
)
from backend.models.enrollment import (
    EnrollmentStatusResponse,
    EnrollResponse,
    WithdrawResponse,
)

from .course_responses import (
    map_comments_to_response,
    map_course_to_response,
    map_courses_to_response,
    map_update_result_to_response,
)
from .course_validators import validate_course_creation, validate_course_update

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/courses", tags=["courses"])


@router.post("", response_model=CourseResponse, status_code=201)
@handle_service_errors
async def create_course(
    request: CreateCourseRequest,
    user: CurrentUser = Depends(get_current_user),
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Create new course owned by the caller.

    Args:
        request: CreateCourseRequest with name, description, image
        user: Authenticated caller
        course_service: Injected CourseService

    Returns:
        CourseResponse: Created course

    Raises:
        HTTPException(400): Invalid request
        HTTPException(401): Not authenticated
    """
    # Business validation
    validate_course_creation(request)

    logger.info(
        "Creating new course",
        extra={"course_name": request.name, "owner": user.username}
    )

    course_data = await course_service.create_course(
        name=request.name,
        description=request.description,
        image=request.image,
        owner_username=user.username,
    )

    return map_course_to_response(course_data)


@router.get("", response_model=list[CourseResponse])
@handle_service_errors
async def list_courses(
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    course_service: CourseService = Depends(get_course_service),
) -> list[CourseResponse]:
    """
    List all courses with pagination.

    Args:
        limit: Maximum number of courses (default 100)
        offset: Number to skip (default 0)
        course_service: Injected CourseService

    Returns:
        list[CourseResponse]: List of courses
    """
    courses = await course_service.get_all_courses(limit=limit, offset=offset)

    logger.info(
        "Courses retrieved successfully",
        extra={"count": len(courses), "limit": limit, "offset": offset}
    )

    return map_courses_to_response(courses)


@router.get("/search", response_model=list[CourseResponse])
@handle_service_errors
async def search_courses(
    name: str = Query(..., min_length=1, max_length=255),
    course_service: CourseService = Depends(get_course_service),
) -> list[CourseResponse]:
    """Case-insensitive search over course names."""
    courses = await course_service.search_by_name(name)
    return map_courses_to_response(courses)


@router.get("/{course_id}", response_model=CourseResponse)
@handle_service_errors
async def get_course(
    course_id: int,
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Get single course by ID, including its primary video URL.

    Raises:
        HTTPException(404): Course not found
    """
    course_data = await course_service.get_course(course_id)
    return map_course_to_response(course_data)


@router.put("/{course_id}", response_model=CourseUpdateResponse)
@handle_service_errors
async def update_course(
    course_id: int,
    request: UpdateCourseRequest,
    user: CurrentUser = Depends(get_current_user),
    course_service: CourseService = Depends(get_course_service),
) -> CourseUpdateResponse:
    """
    Update course by ID.

    Args:
        course_id: Course id
        request: UpdateCourseRequest with name, description, optional image and video_url
        user: Authenticated caller
        course_service: Injected CourseService

    Returns:
        CourseUpdateResponse: Rows affected, previous image, updated course

    Raises:
        HTTPException(403): Course belongs to another user
        HTTPException(404): Course not found
        HTTPException(400): Invalid request
    """
    # Business validation
    validate_course_update(request)

    existing = await course_service.get_course(course_id)
    ensure_owner(existing["user_id"], user, "course", course_id)

    logger.info(
        "Updating course",
        extra={
            "course_id": course_id,
            "username": user.username,
            "updating_image": request.image is not None,
            "updating_video": request.video_url is not None,
        }
    )

    result = await course_service.update_course(
        course_id=course_id,
        name=request.name,
        description=request.description,
        image=request.image,
        video_url=request.video_url,
    )

    return map_update_result_to_response(result)


@router.delete("/{course_id}", status_code=204)
@handle_service_errors
async def delete_course(
    course_id: int,
    user: CurrentUser = Depends(get_current_user),
    course_service: CourseService = Depends(get_course_service),
) -> None:
    """
    Delete one of the caller's courses together with its comments.

    Raises:
        HTTPException(403): Course belongs to another user
        HTTPException(404): Course not found
        HTTPException(409): Sessions still reference the course
    """
    existing = await course_service.get_course(course_id)
    ensure_owner(existing["user_id"], user, "course", course_id)

    logger.info(
        "Deleting course",
        extra={"course_id": course_id, "username": user.username}
    )

    await course_service.delete_course(course_id)


@router.get("/{course_id}/video", response_model=CourseVideoResponse)
@handle_service_errors
async def get_course_video(
    course_id: int,
    video_service: VideoService = Depends(get_video_service),
) -> CourseVideoResponse:
    """
    Get the primary video URL of a course.

    Raises:
        HTTPException(404): Course not found
    """
    video_url = await video_service.get_video_url_by_course(course_id)
    return CourseVideoResponse(course_id=course_id, video_url=video_url)


@router.post("/{course_id}/enroll", response_model=EnrollResponse, status_code=201)
@handle_service_errors
async def enroll(
    course_id: int,
    user: CurrentUser = Depends(get_current_user),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> EnrollResponse:
    """
    Enroll the caller in a course.

    Raises:
        HTTPException(400): Caller already enrolled
        HTTPException(404): Course not found
    """
    if await enrollment_service.check_enrolled(user.username, course_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Already enrolled in this course",
        )

    result = await enrollment_service.enroll(course_id, user.username)
    return EnrollResponse(**result)


@router.post("/{course_id}/withdraw", response_model=WithdrawResponse)
@handle_service_errors
async def withdraw(
    course_id: int,
    user: CurrentUser = Depends(get_current_user),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> WithdrawResponse:
    """
    Withdraw the caller from a course.

    Raises:
        HTTPException(404): Caller has no sessions under the course
    """
    withdrawn = await enrollment_service.withdraw(user.username, course_id)
    return WithdrawResponse(course_id=course_id, withdrawn=withdrawn)


@router.get("/{course_id}/enrollment", response_model=EnrollmentStatusResponse)
@handle_service_errors
async def get_enrollment_status(
    course_id: int,
    user: CurrentUser = Depends(get_current_user),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> EnrollmentStatusResponse:
    """Report whether the caller is enrolled in a course."""
    enrolled = await enrollment_service.check_enrolled(user.username, course_id)
    return EnrollmentStatusResponse(course_id=course_id, enrolled=enrolled)


@router.get("/{course_id}/comments", response_model=list[CommentResponse])
@handle_service_errors
async def list_comments(
    course_id: int,
    comment_service: CommentService = Depends(get_comment_service),
) -> list[CommentResponse]:
    comments = await comment_service.get_comments(course_id)
    return map_comments_to_response(comments)


@router.post("/{course_id}/comments", response_model=CommentResponse, status_code=201)
@handle_service_errors
async def add_comment(
    course_id: int,
    request: CreateCommentRequest,
    user: CurrentUser = Depends(get_current_user),
    comment_service: CommentService = Depends(get_comment_service),
) -> CommentResponse:
    """
    Post a comment on a course as the caller.

    Raises:
        HTTPException(404): Course not found
    """
    comment = await comment_service.add_comment(user.username, course_id, request.text)
    return CommentResponse(**comment)


@router.delete("/{course_id}/comments/{comment_id}", status_code=204)
@handle_service_errors
async def delete_comment(
    course_id: int,
    comment_id: int,
    user: CurrentUser = Depends(get_current_user),
    comment_service: CommentService = Depends(get_comment_service),
) -> None:
    """
    Delete one of the caller's comments.

    Raises:
        HTTPException(404): No comment with this id written by the caller on this course
    """
    deleted = await comment_service.delete_comment(comment_id, user.username, course_id=course_id)
    if not deleted:
        raise CommentNotFoundError(comment_id)

    logger.info(
        "Comment removed",
        extra={"course_id": course_id, "comment_id": comment_id}
    )
