"""
StorageError - Raised when a record store cannot be read or written.
Maps to: HTTP 500 Internal Server Error (reads recover by treating the store as empty)
"""


class StorageError(Exception):
    def __init__(self, message: str = "Storage error."):
        super().__init__(message)


class StorageUnavailableError(StorageError):
    """Backing file could not be created, read, parsed or written."""

    def __init__(self, path: str, reason: str = ""):
        message = f"Record store unavailable: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.path = path
