"""
Find-or-Create Conversation Command.

Looks up the two-party conversation for an unordered pair of users and
creates it on first use. Calling it again with the pair in either order
returns the same conversation unchanged.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from branchchat.application.common.interfaces import Command, CommandHandler
from branchchat.domain.entities.conversation import Conversation, normalize_participants
from branchchat.domain.ports.repositories import ConversationRepository

logger = logging.getLogger(__name__)


@dataclass
class FindOrCreateConversationResult:
    conversation: Conversation
    created: bool


@dataclass(frozen=True)
class FindOrCreateConversationCommand(Command[FindOrCreateConversationResult]):
    user_id_1: Optional[str]
    user_id_2: Optional[str]


class FindOrCreateConversationHandler(CommandHandler[FindOrCreateConversationResult]):
    _conversation_repository: ConversationRepository

    def __init__(self, conversation_repository: ConversationRepository):
        self._conversation_repository = conversation_repository

    async def execute(
        self, command: FindOrCreateConversationCommand
    ) -> FindOrCreateConversationResult:
        participants = normalize_participants(command.user_id_1, command.user_id_2)

        conversation, created = await self._conversation_repository.find_or_create(
            participants
        )
        if created:
            logger.info(
                f"Conversation created: {conversation.id.value} between "
                f"{participants[0].value} and {participants[1].value}"
            )
        return FindOrCreateConversationResult(conversation=conversation, created=created)
