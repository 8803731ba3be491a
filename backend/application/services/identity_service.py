"""
Identity resolver.

Maps user-facing usernames to internal numeric user ids. Every write
operation that acts on behalf of a user resolves identity through here
first, inside the caller's transaction.

Dependencies: backend.boundary.db.CRUD
System role: Username to user id resolution
"""

from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.user_crud import user_crud
from backend.boundary.db.transaction import database_errors
from backend.core.exceptions import IdentityNotFoundError


class IdentityService:
    """Resolve usernames to user ids and back."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize identity service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def resolve(self, username: str) -> int:
        """
        Resolve a username to its user id.

        Args:
            username: Exact username

        Returns:
            int: User id

        Raises:
            IdentityNotFoundError: No user row matches
            DatabaseError: Lookup query failed
        """
        async with database_errors("resolve_identity"):
            user_id = await user_crud.get_id_by_username(self.db, username)
        if user_id is None:
            raise IdentityNotFoundError(username)
        return user_id

    async def get_username(self, user_id: int) -> str:
        """
        Look up the current username of a user id.

        Args:
            user_id: User id (usually taken from a verified access token)

        Returns:
            str: Username

        Raises:
            IdentityNotFoundError: No user row matches
        """
        async with database_errors("get_username"):
            user = await user_crud.get_by_id(self.db, user_id)
        if user is None:
            raise IdentityNotFoundError(str(user_id))
        return user.username
