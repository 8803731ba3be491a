"""
Video domain models and schemas.

Dependencies: pydantic
System role: Video API contracts
"""

from datetime import datetime

from pydantic import BaseModel, Field


class UploadVideoRequest(BaseModel):
    """Request schema for registering an uploaded video."""

    title: str | None = Field(None, max_length=255)
    url: str = Field(..., min_length=1, max_length=1024, description="Stored video path or URL")
    duration: int | None = Field(None, ge=0, description="Duration in seconds")
    description: str | None = Field(None, max_length=4096)
    upload_date: datetime | None = None


class VideoResponse(BaseModel):
    """Response schema for video operations."""

    id: int
    session_id: int | None
    title: str | None
    url: str
    duration: int | None
    description: str | None
    upload_date: datetime | None
