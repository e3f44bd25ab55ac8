"""Video upload commands."""

from .upload_video import UploadVideoCommand, UploadVideoHandler, UploadVideoResult

__all__ = [
    "UploadVideoCommand",
    "UploadVideoHandler",
    "UploadVideoResult",
]
