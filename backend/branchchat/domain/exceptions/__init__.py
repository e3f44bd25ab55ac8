"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic and caught by presentation layer.
Presentation layer maps them to HTTP status codes.
"""

from branchchat.domain.exceptions.validation_error import (
    DomainValidationError,
    InvalidParticipantsError,
    EmptyMessageError,
)
from branchchat.domain.exceptions.conflict import ConflictError, DuplicateUsernameError
from branchchat.domain.exceptions.auth import AuthError, InvalidCredentialsError
from branchchat.domain.exceptions.entity_not_found import (
    EntityNotFoundError,
    ConversationNotFoundError,
    VideoNotFoundError,
)
from branchchat.domain.exceptions.storage import StorageError, StorageUnavailableError
from branchchat.domain.exceptions.recording import (
    RecorderError,
    DeviceUnavailableError,
    UnsupportedEncodingError,
    RecorderStateError,
)

__all__ = [
    "DomainValidationError",
    "InvalidParticipantsError",
    "EmptyMessageError",
    "ConflictError",
    "DuplicateUsernameError",
    "AuthError",
    "InvalidCredentialsError",
    "EntityNotFoundError",
    "ConversationNotFoundError",
    "VideoNotFoundError",
    "StorageError",
    "StorageUnavailableError",
    "RecorderError",
    "DeviceUnavailableError",
    "UnsupportedEncodingError",
    "RecorderStateError",
]
