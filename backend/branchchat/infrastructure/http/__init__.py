"""HTTP clients for talking to the branchchat API."""

from branchchat.infrastructure.http.video_upload_client import VideoUploadClient

__all__ = ["VideoUploadClient"]
