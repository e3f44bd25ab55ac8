"""
Send Message Command.

Appends one message to a conversation's log.

Validation order:
1. conversationId and senderId present (DomainValidationError)
2. textContent or videoUrl present (EmptyMessageError)
3. conversation exists (ConversationNotFoundError)
"""

import logging
from dataclasses import dataclass
from typing import Optional

from branchchat.application.common.interfaces import Command, CommandHandler
from branchchat.domain.entities.message import Message
from branchchat.domain.exceptions import (
    ConversationNotFoundError,
    DomainValidationError,
    EmptyMessageError,
)
from branchchat.domain.ports.repositories import ConversationRepository, MessageRepository
from branchchat.domain.value_objects.conversation_id import ConversationId
from branchchat.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SendMessageCommand(Command[Message]):
    conversation_id: Optional[str]
    sender_id: Optional[str]
    text_content: Optional[str] = None
    video_url: Optional[str] = None


class SendMessageHandler(CommandHandler[Message]):
    def __init__(
        self,
        conv_repo: ConversationRepository,
        msg_repo: MessageRepository,
    ):
        self._conv_repo = conv_repo
        self._msg_repo = msg_repo

    async def execute(self, command: SendMessageCommand) -> Message:
        if not command.conversation_id or not command.sender_id:
            raise DomainValidationError("conversationId and senderId are required.")
        if not command.text_content and not command.video_url:
            raise EmptyMessageError()

        conversation_id = ConversationId(command.conversation_id)
        if not await self._conv_repo.get_by_id(conversation_id):
            raise ConversationNotFoundError()

        message = Message.create(
            conversation_id=conversation_id,
            sender_id=UserId(command.sender_id),
            text_content=command.text_content,
            video_url=command.video_url,
        )
        await self._msg_repo.add(message)

        logger.info(
            f"Message sent in conv {conversation_id.value} by {command.sender_id}"
        )
        return message
