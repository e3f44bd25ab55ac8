"""
ConflictError - Raised when a write collides with existing state.
Maps to: HTTP 409 Conflict
"""


class ConflictError(Exception):
    """Exception raised when an entity already exists."""

    def __init__(self, message: str = "Resource already exists."):
        super().__init__(message)


class DuplicateUsernameError(ConflictError):
    def __init__(self, message: str = "Username already exists."):
        super().__init__(message)
