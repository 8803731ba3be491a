"""
Contact form API endpoints.

Routes:
- POST /contact - Submit a message (anonymous or logged in)
- GET /contact - List submitted messages

Dependencies: backend.application.services, backend.models
System role: Contact form HTTP API
"""

from fastapi import APIRouter, Depends

from backend.api.deps import (
    CurrentUser,
    get_contact_service,
    get_current_user,
    get_optional_current_user,
)
from backend.api.routers.router_utils import handle_service_errors
from backend.application.services.contact_service import ContactService
from backend.models.contact import ContactRequest, ContactResponse

router = APIRouter(prefix="/contact", tags=["contact"])


@router.post("", response_model=ContactResponse, status_code=201)
@handle_service_errors
async def send_message(
    request: ContactRequest,
    user: CurrentUser | None = Depends(get_optional_current_user),
    contact_service: ContactService = Depends(get_contact_service),
) -> ContactResponse:
    """Store a contact message, tagged with the caller's username when logged in."""
    message = await contact_service.send_message(
        email=request.email,
        subject=request.subject,
        message=request.message,
        username=user.username if user else None,
    )
    return ContactResponse(**message)


@router.get("", response_model=list[ContactResponse])
@handle_service_errors
async def list_messages(
    user: CurrentUser = Depends(get_current_user),
    contact_service: ContactService = Depends(get_contact_service),
) -> list[ContactResponse]:
    messages = await contact_service.get_messages()
    return [ContactResponse(**m) for m in messages]
