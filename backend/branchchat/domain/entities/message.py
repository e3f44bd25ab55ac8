"""
Message Entity - A single immutable chat entry carrying text, a video, or both.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from branchchat.domain.exceptions.validation_error import EmptyMessageError
from branchchat.domain.value_objects.message_id import MessageId
from branchchat.domain.value_objects.conversation_id import ConversationId
from branchchat.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class Message:
    id: MessageId
    conversation_id: ConversationId
    sender_id: UserId
    text_content: Optional[str]
    video_url: Optional[str]
    timestamp: datetime
    # Reserved for threaded replies; always None for main-timeline messages.
    branch_parent_message_id: Optional[MessageId] = None

    def __post_init__(self):
        if self.text_content is None and self.video_url is None:
            raise EmptyMessageError()

    @classmethod
    def create(
        cls,
        conversation_id: ConversationId,
        sender_id: UserId,
        text_content: Optional[str] = None,
        video_url: Optional[str] = None,
    ) -> Message:
        """Factory method to create a new Message with a generated ID and timestamp."""
        return cls(
            id=MessageId(str(uuid4())),
            conversation_id=conversation_id,
            sender_id=sender_id,
            text_content=text_content or None,
            video_url=video_url or None,
            timestamp=datetime.now(timezone.utc),
        )
