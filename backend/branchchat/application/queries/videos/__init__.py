"""Video queries."""

from branchchat.application.queries.videos.get_video import (
    GetVideoQuery,
    GetVideoHandler,
    VideoFile,
)

__all__ = [
    "GetVideoQuery",
    "GetVideoHandler",
    "VideoFile",
]
