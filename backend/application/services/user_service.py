"""
User account service.

Registration, credential checks and profile edits. Returned user dicts
never carry the stored password.

Dependencies: backend.boundary.db.CRUD
System role: Account use case orchestration
"""

import logging
import secrets

from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.user_crud import user_crud
from backend.boundary.db.models.user_model import UserModel
from backend.boundary.db.transaction import database_errors, transaction
from backend.core.exceptions import (
    AuthenticationError,
    IdentityNotFoundError,
    UserAlreadyExistsError,
    UserInUseError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)


def user_to_dict(user: UserModel) -> dict:
    """Serialize a user row without its password."""
    return {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "profile_picture": user.profile_picture,
        "created_at": user.created_at,
    }


class UserService:
    """User account service."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize user service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def _get_by_username(self, username: str) -> UserModel:
        user = await user_crud.get_by_username(self.db, username)
        if user is None:
            raise IdentityNotFoundError(username)
        return user

    async def register(
        self,
        username: str,
        email: str,
        password: str,
        profile_picture: str | None = None,
    ) -> dict:
        """
        Create a new account.

        Args:
            username: Unique login name
            email: Unique email address
            password: Account password
            profile_picture: Stored avatar filename

        Returns:
            dict: Created user

        Raises:
            UserAlreadyExistsError: Username or email already registered
        """
        async with transaction(self.db, "register"):
            if await user_crud.get_by_username(self.db, username) is not None:
                raise UserAlreadyExistsError("username", username)
            if await user_crud.get_by_email(self.db, email) is not None:
                raise UserAlreadyExistsError("email", email)

            user = await user_crud.create(
                self.db,
                username=username,
                email=email,
                password=password,
                profile_picture=profile_picture,
            )

        logger.info("User registered", extra={"user_id": user.id, "username": username})
        return user_to_dict(user)

    async def authenticate(self, username: str, password: str) -> dict:
        """
        Check a username/password pair.

        Returns:
            dict: The authenticated user

        Raises:
            AuthenticationError: Unknown user or wrong password
        """
        async with database_errors("authenticate"):
            user = await user_crud.get_by_username(self.db, username)

        if user is None or not secrets.compare_digest(
            user.password.encode("utf-8"), password.encode("utf-8")
        ):
            logger.warning("Login rejected", extra={"username": username})
            raise AuthenticationError("Invalid username or password")

        return user_to_dict(user)

    async def get_profile(self, username: str) -> dict:
        """
        Get a user's profile by username.

        Raises:
            IdentityNotFoundError: Username unknown
        """
        async with database_errors("get_profile"):
            user = await self._get_by_username(username)
        return user_to_dict(user)

    async def get_profile_by_id(self, user_id: int) -> dict:
        async with database_errors("get_profile_by_id"):
            user = await user_crud.get_by_id(self.db, user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user_to_dict(user)

    async def update_username(self, username: str, new_username: str) -> dict:
        """
        Rename an account.

        Raises:
            IdentityNotFoundError: Username unknown
            UserAlreadyExistsError: New username taken by another account
        """
        async with transaction(self.db, "update_username"):
            user = await self._get_by_username(username)
            if new_username != username and await user_crud.get_by_username(self.db, new_username):
                raise UserAlreadyExistsError("username", new_username)
            await user_crud.update_by_id(self.db, user.id, username=new_username)

        logger.info("Username changed", extra={"user_id": user.id, "new_username": new_username})
        return await self.get_profile_by_id(user.id)

    async def update_email(self, username: str, new_email: str) -> dict:
        """
        Change an account's email address.

        Raises:
            IdentityNotFoundError: Username unknown
            UserAlreadyExistsError: Email registered to another account
        """
        async with transaction(self.db, "update_email"):
            user = await self._get_by_username(username)
            existing = await user_crud.get_by_email(self.db, new_email)
            if existing is not None and existing.id != user.id:
                raise UserAlreadyExistsError("email", new_email)
            await user_crud.update_by_id(self.db, user.id, email=new_email)

        logger.info("Email changed", extra={"user_id": user.id})
        return await self.get_profile_by_id(user.id)

    async def update_password(self, username: str, new_password: str) -> bool:
        async with transaction(self.db, "update_password"):
            user = await self._get_by_username(username)
            updated = await user_crud.update_by_id(self.db, user.id, password=new_password)

        logger.info("Password changed", extra={"user_id": user.id})
        return updated > 0

    async def update_profile_picture(self, username: str, profile_picture: str) -> str | None:
        """
        Replace an account's avatar filename.

        Returns:
            str | None: The previous filename, for the caller to clean up

        Raises:
            IdentityNotFoundError: Username unknown
        """
        async with transaction(self.db, "update_profile_picture"):
            user = await self._get_by_username(username)
            previous = user.profile_picture
            await user_crud.update_by_id(self.db, user.id, profile_picture=profile_picture)

        logger.info("Profile picture changed", extra={"user_id": user.id})
        return previous

    async def delete_user(self, user_id: int) -> bool:
        """
        Delete an account that nothing references any more.

        Args:
            user_id: User id

        Returns:
            bool: True if deleted

        Raises:
            UserNotFoundError: No such user
            UserInUseError: Courses, sessions, enrollments or comments
                still reference the user
        """
        async with transaction(self.db, "delete_user"):
            if not await user_crud.exists(self.db, user_id):
                raise UserNotFoundError(user_id)

            dependents = await user_crud.count_dependents(self.db, user_id)
            if dependents:
                raise UserInUseError(user_id, dependents)

            await user_crud.delete_by_id(self.db, user_id)

        logger.info("User deleted", extra={"user_id": user_id})
        return True

    async def user_exists_by_username(self, username: str) -> bool:
        async with database_errors("user_exists_by_username"):
            return await user_crud.get_by_username(self.db, username) is not None

    async def user_exists_by_email(self, email: str) -> bool:
        async with database_errors("user_exists_by_email"):
            return await user_crud.get_by_email(self.db, email) is not None
