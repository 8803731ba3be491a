"""
Tests for ContactService.
"""

import pytest

from backend.application.services.contact_service import ContactService


@pytest.mark.asyncio
async def test_send_and_list_messages(test_async_db) -> None:
    # Arrange
    service = ContactService(test_async_db)

    # Act
    await service.send_message("visitor@example.com", "Pricing", "How much?")
    await service.send_message("alice@example.com", "Bug", "Video won't load", username="alice")

    # Assert
    messages = await service.get_messages()
    assert [m["subject"] for m in messages] == ["Pricing", "Bug"]
    assert messages[0]["username"] is None
    assert messages[1]["username"] == "alice"
