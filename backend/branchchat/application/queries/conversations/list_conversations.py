"""List Conversations Query."""

from dataclasses import dataclass
from typing import Optional
from branchchat.domain.ports.repositories.conversation_repository import (
    ConversationRepository,
)
from branchchat.application.common.interfaces import Query, QueryHandler
from branchchat.domain.entities.conversation import Conversation
from branchchat.domain.exceptions import DomainValidationError
from branchchat.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class ListConversationsQuery(Query[list[Conversation]]):
    user_id: Optional[str]


class ListConversationsHandler(QueryHandler[list[Conversation]]):
    def __init__(self, conversation_repository: ConversationRepository):
        self._conversation_repository = conversation_repository

    async def execute(self, query: ListConversationsQuery) -> list[Conversation]:
        if not query.user_id:
            raise DomainValidationError("userId query parameter is required.")
        # Storage order, i.e. creation order
        return await self._conversation_repository.get_by_participant(
            UserId(query.user_id)
        )
