"""
Conversation Repository Port - Interface for conversation persistence.
Implementation: branchchat/infrastructure/persistence/json_conversation_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from branchchat.domain.entities.conversation import Conversation
from branchchat.domain.value_objects.conversation_id import ConversationId
from branchchat.domain.value_objects.user_id import UserId


class ConversationRepository(ABC):
    @abstractmethod
    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]: ...

    @abstractmethod
    async def get_by_participant(self, user_id: UserId) -> list[Conversation]: ...

    @abstractmethod
    async def find_or_create(
        self, participants: tuple[UserId, UserId]
    ) -> tuple[Conversation, bool]:
        """Return (conversation, created). Lookup and insert happen atomically."""
        ...
