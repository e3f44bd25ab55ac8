"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Is immutable once created (users, conversations and messages are never edited)
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from branchchat.domain.entities.conversation import Conversation
from branchchat.domain.entities.message import Message
from branchchat.domain.entities.user import User

__all__ = [
    "Conversation",
    "Message",
    "User",
]
