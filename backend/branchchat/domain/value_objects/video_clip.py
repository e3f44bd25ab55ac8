"""
VideoClip Value Object - A finished recording ready for upload.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class VideoClip:
    data: bytes = field(repr=False)
    mime_type: str  # negotiated encoding, e.g. "video/webm;codecs=vp9,opus"

    def __post_init__(self):
        if not self.mime_type:
            raise ValueError("VideoClip needs a MIME type")

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def base_type(self) -> str:
        """MIME type without codec parameters ("video/webm")."""
        return self.mime_type.split(";", 1)[0].strip()
