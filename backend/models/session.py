"""
Session domain models and schemas.

Request/response schemas for session operations.

Dependencies: pydantic
System role: Session API contracts
"""

from datetime import time

from pydantic import BaseModel, Field, model_validator


class CreateSessionRequest(BaseModel):
    """Request schema for scheduling a session."""

    course_id: int = Field(..., gt=0, description="Course the session belongs to")
    start_time: time = Field(..., description="Start time of day")
    end_time: time = Field(..., description="End time of day")

    @model_validator(mode="after")
    def check_time_order(self) -> "CreateSessionRequest":
        if self.start_time >= self.end_time:
            raise ValueError("start_time must be before end_time")
        return self


class UpdateSessionRequest(CreateSessionRequest):
    """Request schema for rescheduling a session."""


class SessionResponse(BaseModel):
    """Response schema for session operations."""

    id: int
    course_id: int
    start_time: time
    end_time: time
    user_id: int
