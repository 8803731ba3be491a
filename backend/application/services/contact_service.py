"""
Contact service.

Stores and lists contact form messages.

Dependencies: backend.boundary.db.CRUD
System role: Contact form use case orchestration
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.contact_crud import contact_crud
from backend.boundary.db.models.contact_model import ContactModel
from backend.boundary.db.transaction import database_errors, transaction

logger = logging.getLogger(__name__)


def contact_to_dict(contact: ContactModel) -> dict:
    return {
        "id": contact.id,
        "email": contact.email,
        "subject": contact.subject,
        "message": contact.message,
        "username": contact.username,
        "created_at": contact.created_at,
    }


class ContactService:
    """Contact message service."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def send_message(
        self,
        email: str,
        subject: str,
        message: str,
        username: str | None = None,
    ) -> dict:
        """
        Persist a contact message.

        Args:
            email: Reply address
            subject: Message subject
            message: Message body
            username: Sender username when logged in

        Returns:
            dict: Persisted message
        """
        async with transaction(self.db, "send_message"):
            contact = await contact_crud.create(
                self.db,
                email=email,
                subject=subject,
                message=message,
                username=username,
            )

        logger.info("Contact message stored", extra={"contact_id": contact.id})
        return contact_to_dict(contact)

    async def get_messages(self) -> list[dict]:
        """List every contact message, oldest first."""
        async with database_errors("get_messages"):
            messages = await contact_crud.get_all(self.db)
        return [contact_to_dict(m) for m in messages]
