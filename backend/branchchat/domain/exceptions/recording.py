"""
Recording errors - Raised by the video recorder state machine.
Client-side only; never mapped to an HTTP status.
"""


class RecorderError(Exception):
    pass


class DeviceUnavailableError(RecorderError):
    """Camera/microphone could not be acquired."""

    def __init__(self, reason: str, secure_context: bool = True):
        if secure_context:
            hint = "Ensure camera/mic permissions are granted and no other app is using the camera."
        else:
            hint = "Camera/mic access requires HTTPS."
        super().__init__(f"{reason}. {hint}")
        self.reason = reason
        self.needs_secure_context = not secure_context


class UnsupportedEncodingError(RecorderError):
    def __init__(self, message: str = "No supported MIME type found for recording."):
        super().__init__(message)


class RecorderStateError(RecorderError):
    """Action is not valid in the recorder's current state."""

    def __init__(self, action: str, state: str):
        super().__init__(f"Cannot {action} while {state}")
        self.action = action
        self.state = state
