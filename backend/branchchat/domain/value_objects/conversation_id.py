"""
ConversationId Value Object - Opaque string identity of a conversation.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ConversationId:
    value: str  # conversation_id, UUID string for new conversations

    def __post_init__(self):
        if not self.value:
            raise ValueError("Conversation ID cannot be empty")

    def __str__(self) -> str:
        return self.value
