"""
Media Device Port - Camera/microphone capture capability.

The host platform (a browser, a desktop capture library, a test fake)
implements these so the recorder state machine never touches device APIs
directly.

    MediaDevice.acquire()      -> exclusive camera+mic stream
    MediaStream.start_encoding -> begin buffering encoded chunks
    MediaStream.finalize()     -> stop encoding, return buffered chunks
    MediaStream.release()      -> stop every track (idempotent)
"""

from abc import ABC, abstractmethod


class MediaStream(ABC):
    @property
    @abstractmethod
    def active(self) -> bool:
        """True while any track still holds the device."""
        ...

    @abstractmethod
    def start_encoding(self, mime_type: str) -> None: ...

    @abstractmethod
    def finalize(self) -> list[bytes]: ...

    @abstractmethod
    def release(self) -> None: ...


class MediaDevice(ABC):
    @property
    @abstractmethod
    def secure_context(self) -> bool:
        """Whether the page/process runs in a context allowed to open the camera."""
        ...

    @abstractmethod
    async def acquire(self, video: bool = True, audio: bool = True) -> MediaStream:
        """Raises DeviceUnavailableError on denied permission or missing device."""
        ...

    @abstractmethod
    def is_type_supported(self, mime_type: str) -> bool: ...


class PreviewSurface(ABC):
    """Live preview element the stream is bound to while recording."""

    @abstractmethod
    def attach(self, stream: MediaStream) -> None: ...

    @abstractmethod
    def detach(self) -> None: ...
