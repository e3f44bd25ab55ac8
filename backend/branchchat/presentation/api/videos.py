"""
Videos API Router - Upload boundary for recorded clips and their playback.

Endpoints:
- POST /api/upload/video  multipart field "video" → {videoUrl, filename}
- GET  /videos/{filename}  → raw video bytes

Max upload size: Config.MAX_UPLOAD_MB
"""

import logging
from typing import Optional
from fastapi import APIRouter, File, HTTPException, UploadFile, status
from fastapi.responses import FileResponse
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel, ConfigDict, Field

from branchchat.application.commands.videos import (
    UploadVideoCommand,
    UploadVideoHandler,
)
from branchchat.application.queries.videos import GetVideoQuery, GetVideoHandler
from branchchat.domain.exceptions import DomainValidationError, EntityNotFoundError
from branchchat.config.settings import Config

logger = logging.getLogger(__name__)


# ==================== RESPONSE MODELS ====================
class UploadVideoResponse(BaseModel):
    """Response model for video upload."""

    model_config = ConfigDict(populate_by_name=True)

    video_url: str = Field(alias="videoUrl")
    filename: str


# ==================== ROUTERS ====================
# Two routers: /api/upload for upload, /videos for playback
upload_router = APIRouter(prefix="/api/upload", tags=["videos"])
videos_router = APIRouter(prefix=Config.VIDEO_URL_PREFIX, tags=["videos"])


# ==================== UPLOAD ENDPOINT ====================
@upload_router.post("/video", response_model=UploadVideoResponse)
@inject
async def upload_video(
    handler: FromDishka[UploadVideoHandler],
    video: Optional[UploadFile] = File(default=None),
):
    """
    Upload a recorded clip.

    Request: multipart/form-data
    - video: binary clip data (required)
    """
    if video is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No video file uploaded.",
        )

    content = await video.read()

    max_upload_bytes = int(Config.MAX_UPLOAD_MB * 1024 * 1024)
    if len(content) > max_upload_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File too large. Maximum upload size is {Config.MAX_UPLOAD_MB:g} MB.",
        )

    command = UploadVideoCommand(
        filename=video.filename or "",
        content=content,
        content_type=video.content_type,
    )

    try:
        result = await handler.execute(command)
    except DomainValidationError as e:
        logger.warning(f"Upload validation error: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    return UploadVideoResponse(video_url=result.video_url, filename=result.filename)


# ==================== PLAYBACK ENDPOINT ====================
@videos_router.get("/{filename}")
@inject
async def get_video(
    filename: str,
    handler: FromDishka[GetVideoHandler],
):
    """Stream an uploaded clip."""
    try:
        video = await handler.execute(GetVideoQuery(filename=filename))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

    return FileResponse(path=video.path, media_type=video.media_type)
