"""
Ownership checks for mutating endpoints.

Courses and sessions carry the id of the user who created them; only
that user may change or remove them.
"""

import logging

from fastapi import HTTPException, status

from backend.api.deps.dependencies import CurrentUser

logger = logging.getLogger(__name__)


def ensure_owner(owner_id: int | None, user: CurrentUser, resource: str, resource_id: int) -> None:
    """
    Reject the request unless the caller owns the resource.

    Args:
        owner_id: user_id recorded on the resource
        user: Authenticated caller
        resource: Resource kind used in the error message ("course", "session")
        resource_id: Resource id, for logging

    Raises:
        HTTPException(403): Caller is not the owner
    """
    if owner_id == user.id:
        return

    logger.warning(
        "Ownership check failed",
        extra={"resource": resource, "resource_id": resource_id, "username": user.username},
    )
    raise HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail=f"Only the owner can modify this {resource}",
    )
