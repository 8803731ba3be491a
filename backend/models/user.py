"""
User domain models and schemas.

Request/response schemas for registration, login and profile edits.

Dependencies: pydantic
System role: User API contracts
"""

from datetime import datetime

from pydantic import BaseModel, Field

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class RegisterRequest(BaseModel):
    """Request schema for creating an account."""

    username: str = Field(..., min_length=1, max_length=255, description="Unique username")
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN, description="Unique email")
    password: str = Field(..., min_length=1, max_length=255, description="Account password")
    profile_picture: str | None = Field(None, max_length=512, description="Avatar filename")


class LoginRequest(BaseModel):
    """Request schema for logging in."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UpdateUsernameRequest(BaseModel):
    new_username: str = Field(..., min_length=1, max_length=255)


class UpdateEmailRequest(BaseModel):
    new_email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)


class UpdatePasswordRequest(BaseModel):
    new_password: str = Field(..., min_length=1, max_length=255)


class UpdateProfilePictureRequest(BaseModel):
    profile_picture: str = Field(..., min_length=1, max_length=512)


class UserResponse(BaseModel):
    """Response schema for user operations. Never carries the password."""

    id: int
    username: str
    email: str
    profile_picture: str | None = None
    created_at: datetime


class LoginResponse(BaseModel):
    """Response schema for a successful login."""

    user: UserResponse
    access_token: str
    token_type: str = "bearer"


class ProfilePictureResponse(BaseModel):
    """Response schema for an avatar change."""

    profile_picture: str
    previous_picture: str | None = None
