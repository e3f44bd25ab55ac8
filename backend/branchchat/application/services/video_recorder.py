"""
Video Recorder - Capture lifecycle for one clip at a time.

States:
    IDLE ──start()──► STARTING ──(device acquired)──► RECORDING
      ▲                  │ (error)                        │ stop()
      │                  ▼                                ▼
      ├──────────────── IDLE ◄───────discard()────── PREVIEWING
      │                                          send() │     ▲ (upload failed)
      │                                                 ▼     │
      └──────────────(upload done)──────────────── SENDING ───┘

Invariant: the device stream is released (every track stopped) on every
path out of STARTING/RECORDING: normal stop, error, and close().

UIs should enable only allowed_actions(); the recorder still rejects
out-of-state calls with RecorderStateError so a stray second start()
never opens a second device stream.
"""

import logging
from enum import Enum
from typing import Awaitable, Callable, Generic, Optional, TypeVar

from branchchat.domain.exceptions.recording import (
    DeviceUnavailableError,
    RecorderStateError,
    UnsupportedEncodingError,
)
from branchchat.domain.ports.media_device import MediaDevice, MediaStream, PreviewSurface
from branchchat.domain.value_objects.video_clip import VideoClip

logger = logging.getLogger(__name__)

T = TypeVar("T")

# First entry the device supports wins
PREFERRED_MIME_TYPES = (
    "video/webm;codecs=vp9,opus",
    "video/webm;codecs=vp8,opus",
    "video/webm;codecs=h264,opus",
    "video/mp4;codecs=avc1,mp4a",
    "video/webm",
)


class RecorderState(str, Enum):
    IDLE = "idle"
    STARTING = "starting"
    RECORDING = "recording"
    PREVIEWING = "previewing"
    SENDING = "sending"


_ALLOWED_ACTIONS = {
    RecorderState.IDLE: frozenset({"start"}),
    RecorderState.STARTING: frozenset(),
    RecorderState.RECORDING: frozenset({"stop"}),
    RecorderState.PREVIEWING: frozenset({"send", "discard"}),
    RecorderState.SENDING: frozenset(),
}


class VideoRecorder(Generic[T]):
    def __init__(
        self,
        device: MediaDevice,
        on_complete: Callable[[VideoClip], Awaitable[T]],
        preview: Optional[PreviewSurface] = None,
        mime_types: tuple[str, ...] = PREFERRED_MIME_TYPES,
    ):
        self._device = device
        self._on_complete = on_complete
        self._preview = preview
        self._mime_types = mime_types

        self._state = RecorderState.IDLE
        self._stream: Optional[MediaStream] = None
        self._mime_type: Optional[str] = None
        self._clip: Optional[VideoClip] = None
        # Bumped by close() so a start() still awaiting the device can tell it was cancelled
        self._generation = 0
        self.error: Optional[str] = None

    @property
    def state(self) -> RecorderState:
        return self._state

    @property
    def clip(self) -> Optional[VideoClip]:
        return self._clip

    @property
    def holds_device(self) -> bool:
        return self._stream is not None

    def allowed_actions(self) -> frozenset[str]:
        return _ALLOWED_ACTIONS[self._state]

    def _require(self, action: str) -> None:
        if action not in self.allowed_actions():
            raise RecorderStateError(action, self._state.value)

    def negotiate_mime_type(self) -> str:
        for mime_type in self._mime_types:
            if self._device.is_type_supported(mime_type):
                return mime_type
        raise UnsupportedEncodingError()

    async def start(self) -> None:
        """Acquire camera+mic, bind the live preview and begin encoding."""
        self._require("start")
        self.error = None
        self._clip = None
        self._state = RecorderState.STARTING
        generation = self._generation

        try:
            stream = await self._device.acquire(video=True, audio=True)
        except DeviceUnavailableError as e:
            if generation == self._generation:
                self._fail(str(e))
            raise
        except Exception as e:
            if generation != self._generation:
                # Stale start from before close(); a newer start may be pending
                raise
            logger.error(f"[VideoRecorder] Error accessing media devices: {e}")
            error = DeviceUnavailableError(
                f"Error: {type(e).__name__} - {e}", self._device.secure_context
            )
            self._fail(str(error))
            raise error from e

        if generation != self._generation:
            # close() ran while we were waiting for the device
            stream.release()
            raise RecorderStateError("start", "closed")

        self._stream = stream
        try:
            mime_type = self.negotiate_mime_type()
            if self._preview:
                self._preview.attach(stream)
            stream.start_encoding(mime_type)
        except Exception as e:
            self._release_stream()
            self._fail(str(e))
            raise

        self._mime_type = mime_type
        self._state = RecorderState.RECORDING
        logger.info(f"[VideoRecorder] Recording started using {mime_type}")

    def stop(self) -> VideoClip:
        """Finalize buffered chunks into one clip and release the device."""
        self._require("stop")
        try:
            chunks = self._stream.finalize()
        except Exception as e:
            self._fail(str(e))
            raise
        finally:
            self._release_stream()

        self._clip = VideoClip(data=b"".join(chunks), mime_type=self._mime_type)
        self._state = RecorderState.PREVIEWING
        logger.info(f"[VideoRecorder] Recording stopped: {self._clip.size} bytes")
        return self._clip

    async def send(self) -> T:
        """
        Hand the clip to on_complete and return to IDLE.

        The recorder is SENDING (no actions allowed) while on_complete runs.
        If on_complete raises, it goes back to PREVIEWING with the clip kept
        so the user can retry or discard.
        """
        self._require("send")
        clip = self._clip
        generation = self._generation
        self._state = RecorderState.SENDING
        try:
            result = await self._on_complete(clip)
        except Exception:
            if generation == self._generation:
                self._state = RecorderState.PREVIEWING
            raise

        if generation == self._generation:
            self._clip = None
            self._state = RecorderState.IDLE
        return result

    def discard(self) -> None:
        self._require("discard")
        self._clip = None
        self.error = None
        self._release_stream()
        self._state = RecorderState.IDLE

    def close(self) -> None:
        """Teardown from any state: release the device and drop the clip."""
        self._generation += 1
        self._release_stream()
        self._clip = None
        self._state = RecorderState.IDLE

    async def __aenter__(self) -> "VideoRecorder[T]":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _fail(self, message: str) -> None:
        self.error = message
        self._state = RecorderState.IDLE

    def _release_stream(self) -> None:
        stream, self._stream = self._stream, None
        try:
            if stream is not None:
                stream.release()
        finally:
            if self._preview:
                self._preview.detach()
