"""
Video API endpoints.

Routes:
- POST /videos - Register an uploaded video under the caller's first session
- GET /videos/{id} - Get video metadata
- DELETE /videos/{id} - Delete an uploaded video

Dependencies: backend.application.services, backend.models
System role: Video metadata HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from backend.api.deps import CurrentUser, get_current_user, get_video_service
from backend.api.routers.router_utils import handle_service_errors
from backend.application.services.video_service import VideoService
from backend.core.exceptions import VideoNotFoundError
from backend.models.video import UploadVideoRequest, VideoResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/videos", tags=["videos"])


@router.post("", response_model=VideoResponse, status_code=201)
@handle_service_errors
async def upload_video(
    request: UploadVideoRequest,
    user: CurrentUser = Depends(get_current_user),
    video_service: VideoService = Depends(get_video_service),
) -> VideoResponse:
    """
    Register video metadata for the caller.

    Raises:
        HTTPException(404): Caller owns no session to attach the video to
    """
    video = await video_service.upload_video(
        username=user.username,
        title=request.title,
        url=request.url,
        duration=request.duration,
        description=request.description,
        upload_date=request.upload_date,
    )
    return VideoResponse(**video)


@router.get("/{video_id}", response_model=VideoResponse)
@handle_service_errors
async def get_video(
    video_id: int,
    video_service: VideoService = Depends(get_video_service),
) -> VideoResponse:
    video = await video_service.get_video(video_id)
    return VideoResponse(**video)


@router.delete("/{video_id}", status_code=204)
@handle_service_errors
async def delete_video(
    video_id: int,
    user: CurrentUser = Depends(get_current_user),
    video_service: VideoService = Depends(get_video_service),
) -> None:
    """
    Delete an uploaded video.

    Raises:
        HTTPException(400): Video is a course's primary video
        HTTPException(404): Video not found
    """
    if not await video_service.delete_video(video_id):
        raise VideoNotFoundError(video_id)

    logger.info("Video deleted via API", extra={"video_id": video_id, "username": user.username})
