"""
Contact message CRUD operations.

Dependencies: backend.boundary.db.models
System role: Contact form persistence operations
"""

from backend.boundary.db.models.contact_model import ContactModel
from backend.boundary.db.CRUD.base_crud import BaseCRUD


class ContactCRUD(BaseCRUD[ContactModel]):
    """CRUD operations for ContactModel."""

    def __init__(self) -> None:
        """Initialize ContactCRUD with ContactModel."""
        super().__init__(ContactModel)


contact_crud = ContactCRUD()
