"""
MessageId Value Object - Opaque string identity of a message.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MessageId:
    value: str  # message_id, UUID string for new messages

    def __post_init__(self):
        if not self.value:
            raise ValueError("Message ID cannot be empty")

    def __str__(self) -> str:
        return self.value
