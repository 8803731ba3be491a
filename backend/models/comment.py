"""
Comment domain models and schemas.

Dependencies: pydantic
System role: Comment API contracts
"""

from datetime import datetime

from pydantic import BaseModel, Field


class CreateCommentRequest(BaseModel):
    """Request schema for posting a comment."""

    text: str = Field(..., min_length=1, max_length=4096, description="Comment body")


class CommentResponse(BaseModel):
    id: int
    user_id: int
    course_id: int
    text: str
    created_at: datetime
