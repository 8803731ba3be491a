"""
User CRUD operations.

Provides Create, Read, Update, Delete operations for UserModel
with username/email lookups and dependent-row counting.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Account persistence operations
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.models.comment_model import CommentModel
from backend.boundary.db.models.course_model import CourseModel
from backend.boundary.db.models.enrollment_model import EnrollmentModel
from backend.boundary.db.models.session_model import SessionModel
from backend.boundary.db.models.user_model import UserModel
from backend.boundary.db.CRUD.base_crud import BaseCRUD


class UserCRUD(BaseCRUD[UserModel]):
    """CRUD operations for UserModel."""

    def __init__(self) -> None:
        """Initialize UserCRUD with UserModel."""
        super().__init__(UserModel)

    async def get_by_username(self, session: AsyncSession, username: str) -> UserModel | None:
        """
        Retrieve a user by username.

        Args:
            session: Async database session
            username: Exact username

        Returns:
            UserModel if found, None otherwise
        """
        stmt = select(UserModel).where(UserModel.username == username)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_id_by_username(self, session: AsyncSession, username: str) -> int | None:
        """
        Resolve a username to its numeric id.

        Args:
            session: Async database session
            username: Exact username

        Returns:
            User id if found, None otherwise
        """
        stmt = select(UserModel.id).where(UserModel.username == username)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, session: AsyncSession, email: str) -> UserModel | None:
        """Retrieve a user by email address."""
        stmt = select(UserModel).where(UserModel.email == email)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def count_dependents(self, session: AsyncSession, user_id: int) -> dict[str, int]:
        """
        Count rows in other tables that reference a user.

        Args:
            session: Async database session
            user_id: User id

        Returns:
            dict: Table name to referencing row count (zero counts omitted)
        """
        counts: dict[str, int] = {}
        for table, model in (
            ("course", CourseModel),
            ("session", SessionModel),
            ("enrollment", EnrollmentModel),
            ("comment", CommentModel),
        ):
            stmt = select(func.count()).select_from(model).where(model.user_id == user_id)
            count = (await session.execute(stmt)).scalar_one()
            if count:
                counts[table] = count
        return counts


user_crud = UserCRUD()
