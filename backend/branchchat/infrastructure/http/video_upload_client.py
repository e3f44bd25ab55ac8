"""
Video Upload Client - The upload boundary between the recorder and the server.

Posts a finished clip as multipart field "video" to POST /api/upload/video
and returns the videoUrl that can be attached to a message.

Usage:
    client = VideoUploadClient("http://localhost:3001")
    recorder = VideoRecorder(device, on_complete=client.upload)
    ...
    video_url = await recorder.send()
"""

import logging
from typing import Optional

import httpx

from branchchat.domain.value_objects.video_clip import VideoClip

logger = logging.getLogger(__name__)


class VideoUploadClient:
    UPLOAD_PATH = "/api/upload/video"

    def __init__(
        self,
        backend_url: str,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.backend_url = backend_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def _filename_for(self, clip: VideoClip) -> str:
        extension = clip.base_type.split("/", 1)[-1] or "webm"
        return f"recording.{extension}"

    async def upload(self, clip: VideoClip) -> str:
        """
        Upload the clip and return its videoUrl.

        Raises:
            httpx.HTTPStatusError: If the server rejects the upload
            ValueError: If a success response carries no videoUrl
        """
        files = {"video": (self._filename_for(clip), clip.data, clip.base_type)}
        async with httpx.AsyncClient(
            timeout=self._timeout, transport=self._transport
        ) as client:
            response = await client.post(
                f"{self.backend_url}{self.UPLOAD_PATH}", files=files
            )

            if response.status_code >= 400:
                error_detail = response.text
                try:
                    payload = response.json()
                except ValueError:
                    payload = None
                if isinstance(payload, dict) and payload.get("message"):
                    error_detail = payload["message"]
                raise httpx.HTTPStatusError(
                    f"Upload API error ({response.status_code}): {error_detail}",
                    request=response.request,
                    response=response,
                )

            try:
                data = response.json()
            except ValueError:
                data = None
            if not isinstance(data, dict) or not data.get("videoUrl"):
                raise ValueError(
                    f"Upload API returned no videoUrl ({response.status_code}): {response.text}"
                )
            logger.info(
                f"[VideoUpload] Uploaded {clip.size} bytes as {data.get('filename')}"
            )
            return data["videoUrl"]
