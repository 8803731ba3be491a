"""
User account API endpoints.

Routes:
- POST /users/register - Create an account
- POST /users/login - Check credentials and issue an access token cookie
- POST /users/logout - Clear the access token cookie
- GET /users/profile - Caller's profile
- PUT /users/username, /users/email, /users/password, /users/profile-picture
- DELETE /users/{user_id} - Delete the caller's own account

Dependencies: backend.application.services, backend.core.security, backend.models
System role: Account management HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from backend.api.deps import (
    CurrentUser,
    get_current_user,
    get_settings_dependency,
    get_user_service,
)
from backend.api.routers.router_utils import handle_service_errors
from backend.application.services.user_service import UserService
from backend.configs import Settings
from backend.core.security import create_access_token
from backend.models.common import MessageResponse
from backend.models.user import (
    LoginRequest,
    LoginResponse,
    ProfilePictureResponse,
    RegisterRequest,
    UpdateEmailRequest,
    UpdatePasswordRequest,
    UpdateProfilePictureRequest,
    UpdateUsernameRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/register", response_model=UserResponse, status_code=201)
@handle_service_errors
async def register(
    request: RegisterRequest,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """
    Create a new account.

    Raises:
        HTTPException(409): Username or email already registered
    """
    user = await user_service.register(
        username=request.username,
        email=request.email,
        password=request.password,
        profile_picture=request.profile_picture,
    )
    return UserResponse(**user)


@router.post("/login", response_model=LoginResponse)
@handle_service_errors
async def login(
    request: LoginRequest,
    response: Response,
    user_service: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_settings_dependency),
) -> LoginResponse:
    """
    Check credentials and issue an access token.

    The token is returned in the body and also set as an HttpOnly cookie.

    Raises:
        HTTPException(401): Invalid username or password
    """
    user = await user_service.authenticate(request.username, request.password)
    token = create_access_token(user["id"], settings.auth)

    response.set_cookie(
        key=settings.auth.cookie_name,
        value=token,
        httponly=True,
        secure=settings.auth.cookie_secure,
        samesite="lax",
        max_age=settings.auth.access_token_expire_minutes * 60,
    )

    logger.info("User logged in", extra={"user_id": user["id"]})
    return LoginResponse(user=UserResponse(**user), access_token=token)


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    settings: Settings = Depends(get_settings_dependency),
) -> MessageResponse:
    """Clear the access token cookie."""
    response.delete_cookie(settings.auth.cookie_name)
    return MessageResponse(message="Logged out")


@router.get("/profile", response_model=UserResponse)
@handle_service_errors
async def get_profile(
    user: CurrentUser = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    profile = await user_service.get_profile_by_id(user.id)
    return UserResponse(**profile)


@router.put("/username", response_model=UserResponse)
@handle_service_errors
async def update_username(
    request: UpdateUsernameRequest,
    user: CurrentUser = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """
    Rename the caller's account.

    Raises:
        HTTPException(409): Username taken
    """
    profile = await user_service.update_username(user.username, request.new_username)
    return UserResponse(**profile)


@router.put("/email", response_model=UserResponse)
@handle_service_errors
async def update_email(
    request: UpdateEmailRequest,
    user: CurrentUser = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """
    Change the caller's email address.

    Raises:
        HTTPException(409): Email registered to another account
    """
    profile = await user_service.update_email(user.username, request.new_email)
    return UserResponse(**profile)


@router.put("/password", response_model=MessageResponse)
@handle_service_errors
async def update_password(
    request: UpdatePasswordRequest,
    user: CurrentUser = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
) -> MessageResponse:
    await user_service.update_password(user.username, request.new_password)
    return MessageResponse(message="Password updated")


@router.put("/profile-picture", response_model=ProfilePictureResponse)
@handle_service_errors
async def update_profile_picture(
    request: UpdateProfilePictureRequest,
    user: CurrentUser = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
) -> ProfilePictureResponse:
    """Replace the caller's avatar; the previous filename is returned for cleanup."""
    previous = await user_service.update_profile_picture(user.username, request.profile_picture)
    return ProfilePictureResponse(
        profile_picture=request.profile_picture,
        previous_picture=previous,
    )


@router.delete("/{user_id}", status_code=204)
@handle_service_errors
async def delete_user(
    user_id: int,
    response: Response,
    user: CurrentUser = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_settings_dependency),
) -> None:
    """
    Delete the caller's own account.

    Raises:
        HTTPException(403): Attempt to delete another account
        HTTPException(409): Courses, sessions, enrollments or comments remain
    """
    if user_id != user.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Cannot delete another user's account",
        )

    await user_service.delete_user(user_id)
    response.delete_cookie(settings.auth.cookie_name)
