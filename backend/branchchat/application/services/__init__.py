"""Application services that orchestrate ports beyond a single command."""

from branchchat.application.services.video_recorder import (
    PREFERRED_MIME_TYPES,
    RecorderState,
    VideoRecorder,
)

__all__ = [
    "PREFERRED_MIME_TYPES",
    "RecorderState",
    "VideoRecorder",
]
