"""
Session API endpoints.

Routes:
- POST /sessions - Schedule a session owned by the caller
- PUT /sessions/{id} - Reschedule a session
- DELETE /sessions/{id} - Delete a session and its enrollments
- GET /sessions/course/{course_id} - List a course's sessions

Dependencies: backend.application.services, backend.models
System role: Session management HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from backend.api.deps import (
    CurrentUser,
    get_course_service,
    get_current_user,
    get_session_service,
)
from backend.api.routers.router_utils import ensure_owner, handle_service_errors
from backend.application.services.course_service import CourseService
from backend.application.services.session_service import SessionService
from backend.core.exceptions import CourseNotFoundError, SessionNotFoundError
from backend.models.session import (
    CreateSessionRequest,
    SessionResponse,
    UpdateSessionRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.post("", response_model=SessionResponse, status_code=201)
@handle_service_errors
async def create_session(
    request: CreateSessionRequest,
    user: CurrentUser = Depends(get_current_user),
    session_service: SessionService = Depends(get_session_service),
    course_service: CourseService = Depends(get_course_service),
) -> SessionResponse:
    """
    Schedule a session under a course.

    Args:
        request: CreateSessionRequest with course_id, start_time, end_time
        user: Authenticated caller, recorded as the session owner
        session_service: Injected SessionService
        course_service: Injected CourseService

    Returns:
        SessionResponse: Created session

    Raises:
        HTTPException(404): Course not found
    """
    if not await course_service.course_exists(request.course_id):
        raise CourseNotFoundError(request.course_id)

    session_id = await session_service.create_session(
        course_id=request.course_id,
        start_time=request.start_time,
        end_time=request.end_time,
        owner_username=user.username,
    )
    session_data = await session_service.get_session(session_id)
    return SessionResponse(**session_data)


@router.put("/{session_id}", response_model=SessionResponse)
@handle_service_errors
async def update_session(
    session_id: int,
    request: UpdateSessionRequest,
    user: CurrentUser = Depends(get_current_user),
    session_service: SessionService = Depends(get_session_service),
    course_service: CourseService = Depends(get_course_service),
) -> SessionResponse:
    """
    Reschedule one of the caller's sessions or move it to another course.

    Raises:
        HTTPException(403): Session belongs to another user
        HTTPException(404): Session or course not found
    """
    existing = await session_service.get_session(session_id)
    ensure_owner(existing["user_id"], user, "session", session_id)
    if not await course_service.course_exists(request.course_id):
        raise CourseNotFoundError(request.course_id)

    await session_service.update_session(
        session_id=session_id,
        course_id=request.course_id,
        start_time=request.start_time,
        end_time=request.end_time,
    )

    logger.info(
        "Session rescheduled",
        extra={"session_id": session_id, "username": user.username}
    )

    session_data = await session_service.get_session(session_id)
    return SessionResponse(**session_data)


@router.delete("/{session_id}", status_code=204)
@handle_service_errors
async def delete_session(
    session_id: int,
    user: CurrentUser = Depends(get_current_user),
    session_service: SessionService = Depends(get_session_service),
) -> None:
    """
    Delete one of the caller's sessions by ID.

    Raises:
        HTTPException(403): Session belongs to another user
        HTTPException(404): Session not found
    """
    existing = await session_service.get_session(session_id)
    ensure_owner(existing["user_id"], user, "session", session_id)

    deleted = await session_service.delete_session_by_id(session_id)
    if not deleted:
        raise SessionNotFoundError(session_id)

    logger.info(
        "Session deleted via API",
        extra={"session_id": session_id, "username": user.username}
    )


@router.get("/course/{course_id}", response_model=list[SessionResponse])
@handle_service_errors
async def list_course_sessions(
    course_id: int,
    session_service: SessionService = Depends(get_session_service),
) -> list[SessionResponse]:
    """List every session of a course, ordered by id."""
    sessions = await session_service.get_sessions_by_course(course_id)
    return [SessionResponse(**s) for s in sessions]
