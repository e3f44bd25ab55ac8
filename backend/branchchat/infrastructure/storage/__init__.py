"""File storage for uploaded videos."""

from branchchat.infrastructure.storage.video_storage_service import VideoStorageService

__all__ = ["VideoStorageService"]
