"""
Persistence Layer - Flat-file implementations.

Contains the JSON record store and the repository implementations for domain ports.
"""

from branchchat.infrastructure.persistence.json_record_store import JsonRecordStore
from branchchat.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)
from branchchat.infrastructure.persistence.json_conversation_repository import (
    JsonConversationRepository,
)
from branchchat.infrastructure.persistence.json_message_repository import (
    JsonMessageRepository,
)

__all__ = [
    "JsonRecordStore",
    "JsonUserRepository",
    "JsonConversationRepository",
    "JsonMessageRepository",
]
