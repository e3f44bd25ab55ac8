"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from branchchat.domain.value_objects.user_id import UserId
from branchchat.domain.value_objects.username import Username
from branchchat.domain.value_objects.conversation_id import ConversationId
from branchchat.domain.value_objects.message_id import MessageId
from branchchat.domain.value_objects.video_clip import VideoClip

__all__ = [
    "UserId",
    "Username",
    "ConversationId",
    "MessageId",
    "VideoClip",
]
