"""
List Messages Query - Message history of one conversation, oldest first.

An unknown conversation id yields an empty list rather than an error.
"""

from dataclasses import dataclass

from branchchat.application.common.interfaces import Query, QueryHandler
from branchchat.domain.entities.message import Message
from branchchat.domain.ports.repositories import MessageRepository
from branchchat.domain.value_objects.conversation_id import ConversationId


@dataclass(frozen=True)
class ListMessagesQuery(Query[list[Message]]):
    conversation_id: ConversationId


class ListMessagesHandler(QueryHandler[list[Message]]):
    def __init__(self, msg_repo: MessageRepository):
        self._msg_repo = msg_repo

    async def execute(self, query: ListMessagesQuery) -> list[Message]:
        return await self._msg_repo.get_by_conversation(query.conversation_id)
