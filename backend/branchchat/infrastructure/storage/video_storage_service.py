"""
VideoStorageService - Pure disk I/O for uploaded video clips.

This service handles all file system operations:
- Save clips under the video directory with a unique, sanitized name
- Resolve a public file name back to a path on disk

This is a SYNC service - no database, no async.
"""

import mimetypes
import os
import re
import logging
from datetime import datetime, timezone
from typing import Optional

logger = logging.getLogger(__name__)

# Extensions for the MIME types the recorder negotiates
_EXTENSION_FOR_TYPE = {
    "video/webm": "webm",
    "video/mp4": "mp4",
    "video/ogg": "ogg",
    "video/quicktime": "mov",
    "video/x-matroska": "mkv",
}


class VideoStorageService:
    """
    Pure file system operations for the video directory.

    All methods are synchronous since file I/O in Python is sync.
    """

    def __init__(self, video_dir: str):
        self.video_dir = video_dir

    def ensure_dir(self) -> str:
        os.makedirs(self.video_dir, exist_ok=True)
        return self.video_dir

    def save_video(
        self,
        content: bytes,
        filename: str,
        content_type: Optional[str] = None,
    ) -> str:
        """
        Save clip content to disk.

        Args:
            content: Clip bytes
            filename: Original filename (may be empty or lack an extension)
            content_type: MIME type sent by the client, used to pick an extension

        Returns:
            Stored file name (relative to the video directory)
        """
        self.ensure_dir()

        safe_filename = self._sanitize_filename(filename or "video")
        if not self.get_extension(safe_filename):
            extension = self.extension_for_type(content_type)
            if extension:
                safe_filename = f"{safe_filename}.{extension}"

        timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S%f")
        stored_name = f"{timestamp}_{safe_filename}"
        file_path = os.path.join(self.video_dir, stored_name)

        with open(file_path, "wb") as f:
            f.write(content)

        logger.info(f"[VideoStorage] Saved video: {stored_name} ({len(content)} bytes)")
        return stored_name

    def resolve(self, filename: str) -> Optional[str]:
        """
        Map a public file name to its path on disk.

        Returns None for names that are not plain file names (no separators,
        no dot-segments) or that do not exist.
        """
        if not filename or filename != os.path.basename(filename):
            return None
        if filename in {".", ".."} or "\\" in filename:
            return None

        file_path = os.path.join(self.video_dir, filename)
        if not os.path.isfile(file_path):
            return None
        return file_path

    def media_type(self, filename: str) -> str:
        guessed, _ = mimetypes.guess_type(filename)
        if guessed:
            return guessed
        extension = self.get_extension(filename)
        for mime, ext in _EXTENSION_FOR_TYPE.items():
            if ext == extension:
                return mime
        return "application/octet-stream"

    @staticmethod
    def extension_for_type(content_type: Optional[str]) -> str:
        if not content_type:
            return ""
        # "video/webm;codecs=vp9,opus" -> "video/webm"
        base_type = content_type.split(";", 1)[0].strip().lower()
        return _EXTENSION_FOR_TYPE.get(base_type, "")

    def _sanitize_filename(self, filename: str) -> str:
        """Replace unsafe characters so the name is safe for the file system."""
        safe = re.sub(r"[^\w\-_\. ]", "_", os.path.basename(filename))
        safe = safe.strip().lstrip(".")
        if not safe:
            safe = "video"
        return safe

    @staticmethod
    def get_extension(filename: str) -> str:
        """Extension without dot (lowercase), or empty string."""
        if "." in filename:
            return filename.rsplit(".", 1)[1].lower()
        return ""
