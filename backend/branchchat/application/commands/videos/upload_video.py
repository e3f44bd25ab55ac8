"""
Upload Video Command.

Stores a recorded clip under the video directory and returns the public URL
that messages reference in their videoUrl field.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from branchchat.application.common.interfaces import Command, CommandHandler
from branchchat.domain.exceptions import DomainValidationError
from branchchat.infrastructure.storage.video_storage_service import VideoStorageService

logger = logging.getLogger(__name__)


@dataclass
class UploadVideoResult:
    video_url: str
    filename: str


@dataclass(frozen=True)
class UploadVideoCommand(Command[UploadVideoResult]):
    filename: str
    content: bytes
    content_type: Optional[str] = None


class UploadVideoHandler(CommandHandler[UploadVideoResult]):
    def __init__(
        self,
        storage: VideoStorageService,
        allowed_extensions: list[str],
        url_prefix: str = "/videos",
    ):
        self._storage = storage
        self._allowed_extensions = {e.strip().lower() for e in allowed_extensions if e.strip()}
        self._url_prefix = url_prefix.rstrip("/")

    def _validate(self, command: UploadVideoCommand) -> None:
        if not command.content:
            raise DomainValidationError("No video file uploaded.")

        content_type = (command.content_type or "").lower()
        if content_type and not (
            content_type.startswith("video/")
            or content_type == "application/octet-stream"
        ):
            raise DomainValidationError(f"Unsupported content type: {command.content_type}")

        extension = self._storage.get_extension(command.filename or "")
        if extension and extension not in self._allowed_extensions:
            raise DomainValidationError(f"Unsupported video extension: .{extension}")

    async def execute(self, command: UploadVideoCommand) -> UploadVideoResult:
        self._validate(command)

        stored_name = self._storage.save_video(
            content=command.content,
            filename=command.filename,
            content_type=command.content_type,
        )
        logger.info(f"Video uploaded: {stored_name}")
        return UploadVideoResult(
            video_url=f"{self._url_prefix}/{stored_name}",
            filename=stored_name,
        )
