"""
Message Repository Port - Interface for message persistence.
Implementation: branchchat/infrastructure/persistence/json_message_repository.py
"""

from abc import ABC, abstractmethod

from branchchat.domain.entities.message import Message
from branchchat.domain.value_objects.conversation_id import ConversationId


class MessageRepository(ABC):
    @abstractmethod
    async def get_by_conversation(
        self, conversation_id: ConversationId
    ) -> list[Message]:
        """Messages of one conversation, oldest first."""
        ...

    @abstractmethod
    async def add(self, message: Message) -> None: ...
