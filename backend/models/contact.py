"""
Contact form schemas.

Dependencies: pydantic
System role: Contact API contracts
"""

from datetime import datetime

from pydantic import BaseModel, Field

from backend.models.user import EMAIL_PATTERN


class ContactRequest(BaseModel):
    """Request schema for the contact form."""

    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    subject: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1, max_length=10000)


class ContactResponse(BaseModel):
    id: int
    email: str
    subject: str
    message: str
    username: str | None
    created_at: datetime
