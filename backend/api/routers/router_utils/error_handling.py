"""
Service error handling for routers.

Provides a decorator that maps service-layer exceptions onto HTTP
responses consistently across every endpoint.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from backend.core.exceptions import (
    AuthenticationError,
    CommentNotFoundError,
    CourseHasSessionsError,
    CourseNotFoundError,
    CoursePlatformException,
    DatabaseError,
    IdentityNotFoundError,
    NoSessionsFoundError,
    SessionNotFoundError,
    UserAlreadyExistsError,
    UserInUseError,
    UserNotFoundError,
    ValidationError,
    VideoNotFoundError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])

NOT_FOUND_ERRORS = (
    IdentityNotFoundError,
    UserNotFoundError,
    CourseNotFoundError,
    SessionNotFoundError,
    NoSessionsFoundError,
    CommentNotFoundError,
    VideoNotFoundError,
)

CONFLICT_ERRORS = (
    UserAlreadyExistsError,
    UserInUseError,
    CourseHasSessionsError,
)


def handle_service_errors(func: F) -> F:
    """
    Decorator to handle service errors and transform them into HTTPExceptions.

    Mapping:
    - missing users, courses, sessions, comments, videos -> 404
    - duplicate or still-referenced rows -> 409
    - ValidationError -> 400
    - AuthenticationError -> 401
    - DatabaseError -> 503
    - anything else -> 500

    HTTPExceptions raised by the endpoint pass through untouched.
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except NOT_FOUND_ERRORS as e:
            logger.warning("Resource not found", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except CONFLICT_ERRORS as e:
            logger.warning("Conflicting request", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)

        except ValidationError as e:
            logger.warning("Invalid request", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except AuthenticationError as e:
            logger.warning("Authentication failed", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=e.message,
                headers={"WWW-Authenticate": "Bearer"},
            )

        except DatabaseError as e:
            logger.error("Database unavailable", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Database temporarily unavailable",
            )

        except CoursePlatformException as e:
            logger.exception("Unhandled service error", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=e.message,
            )

        except Exception as e:
            logger.exception("Unexpected failure in request", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred",
            )

    return wrapper  # type: ignore
