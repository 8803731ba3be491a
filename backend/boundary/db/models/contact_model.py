"""
Contact message ORM model.

Messages submitted through the contact form.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Contact form persistence
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from backend.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class ContactModel(Base, IntegerIDMixin, TimestampMixin):
    """Contact message ORM model."""

    __tablename__ = "contact"

    email: Mapped[str] = mapped_column(String(255), nullable=False)
    subject: Mapped[str] = mapped_column(String(255), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    username: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
