"""
DomainValidationError - Raised when input is missing or violates a business rule.
Maps to: HTTP 400 Bad Request
"""


class DomainValidationError(Exception):
    """Exception raised for domain validation errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidParticipantsError(DomainValidationError):
    """A conversation needs two distinct, non-empty participant ids."""

    def __init__(self, message: str = "Both userId1 and userId2 are required."):
        super().__init__(message)


class EmptyMessageError(DomainValidationError):
    """A message must carry text, a video, or both."""

    def __init__(self, message: str = "Either textContent or videoUrl is required."):
        super().__init__(message)
