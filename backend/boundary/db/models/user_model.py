"""
User ORM model.

Represents a registered account. Courses, sessions, enrollments and
comments reference users by integer id.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Account persistence and identity resolution
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from backend.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class UserModel(Base, IntegerIDMixin, TimestampMixin):
    """
    User ORM model.

    Rows are never deleted implicitly: other tables keep plain foreign keys
    without ON DELETE rules, so removal must be handled by the service.

    Attributes:
        id: Integer primary key (auto-generated)
        username: Unique login name, resolved to id by the identity service
        email: Unique contact address
        password: Stored credential (opaque to this layer)
        profile_picture: Optional stored filename of the avatar image
        created_at: Registration timestamp (UTC)
        updated_at: Last profile modification timestamp (UTC)
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
        doc="Unique username",
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        doc="Unique email address",
    )

    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="Account password",
    )

    profile_picture: Mapped[str | None] = mapped_column(
        String(512),
        nullable=True,
        default=None,
        doc="Profile picture filename",
    )
