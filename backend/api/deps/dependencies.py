"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: backend.configs, backend.application, backend.boundary
System role: DI container for service injection
"""

import logging
from dataclasses import dataclass
from functools import lru_cache

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from backend.application.services import (
    CommentService,
    ContactService,
    CourseService,
    EnrollmentService,
    IdentityService,
    SessionService,
    UserService,
    VideoService,
)
from backend.boundary.db import get_async_db
from backend.configs import Settings, get_settings
from backend.core.exceptions import AuthenticationError, IdentityNotFoundError
from backend.core.security import decode_access_token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurrentUser:
    """Authenticated caller, resolved from a verified access token."""

    id: int
    username: str


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_identity_service(db: AsyncSession = Depends(get_async_db)) -> IdentityService:
    return IdentityService(db=db)


def get_user_service(db: AsyncSession = Depends(get_async_db)) -> UserService:
    """
    Get user service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        UserService: User service instance
    """
    return UserService(db=db)


def get_course_service(db: AsyncSession = Depends(get_async_db)) -> CourseService:
    """
    Get course service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        CourseService: Course service instance
    """
    return CourseService(db=db)


def get_session_service(db: AsyncSession = Depends(get_async_db)) -> SessionService:
    """
    Get session service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        SessionService: Session service instance
    """
    return SessionService(db=db)


def get_enrollment_service(db: AsyncSession = Depends(get_async_db)) -> EnrollmentService:
    """
    Get enrollment service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        EnrollmentService: Enrollment service instance
    """
    return EnrollmentService(db=db)


def get_comment_service(db: AsyncSession = Depends(get_async_db)) -> CommentService:
    return CommentService(db=db)


def get_video_service(db: AsyncSession = Depends(get_async_db)) -> VideoService:
    return VideoService(db=db)


def get_contact_service(db: AsyncSession = Depends(get_async_db)) -> ContactService:
    return ContactService(db=db)


def _extract_token(request: Request, cookie_name: str) -> str | None:
    """Read the access token from the auth cookie or a Bearer header."""
    token = request.cookies.get(cookie_name)
    if token:
        return token

    authorization = request.headers.get("Authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()
    return None


async def get_optional_current_user(
    request: Request,
    identity: IdentityService = Depends(get_identity_service),
    settings: Settings = Depends(get_settings_dependency),
) -> CurrentUser | None:
    """
    Resolve the caller from an access token, if one was sent.

    Returns:
        CurrentUser | None: None when no token is present

    Raises:
        HTTPException(401): Token present but invalid, or its user is gone
    """
    token = _extract_token(request, settings.auth.cookie_name)
    if token is None:
        return None

    try:
        user_id = decode_access_token(token, settings.auth)
        username = await identity.get_username(user_id)
    except (AuthenticationError, IdentityNotFoundError) as e:
        logger.warning("Rejected access token", extra={"error": str(e)})
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired credentials",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    return CurrentUser(id=user_id, username=username)


async def get_current_user(
    user: CurrentUser | None = Depends(get_optional_current_user),
) -> CurrentUser:
    """
    Require an authenticated caller.

    Raises:
        HTTPException(401): No token, or token rejected
    """
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user
