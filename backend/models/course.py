"""
Course domain models and schemas.

Request/response schemas for course operations.

Dependencies: pydantic
System role: Course API contracts
"""

from datetime import datetime

from pydantic import BaseModel, Field


class CreateCourseRequest(BaseModel):
    """Request schema for creating a new course."""

    name: str = Field(..., min_length=1, max_length=255, description="Course name")
    description: str | None = Field(None, max_length=4096, description="Course description")
    image: str | None = Field(None, max_length=512, description="Stored image filename")


class UpdateCourseRequest(BaseModel):
    """Request schema for updating a course."""

    name: str = Field(..., min_length=1, max_length=255, description="Course name")
    description: str | None = Field(None, max_length=4096, description="Course description")
    image: str | None = Field(None, max_length=512, description="New image filename")
    video_url: str | None = Field(None, max_length=1024, description="New primary video URL")


class CourseResponse(BaseModel):
    """Response schema for course operations."""

    id: int
    name: str
    description: str | None
    image: str | None
    user_id: int
    video_id: int | None
    created_at: datetime
    updated_at: datetime
    video_url: str | None = None


class CourseUpdateResponse(BaseModel):
    """Response schema for a course edit."""

    updated: int
    previous_image: str | None
    course: CourseResponse


class CourseVideoResponse(BaseModel):
    """Primary video URL of a course."""

    course_id: int
    video_url: str
