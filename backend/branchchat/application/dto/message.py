"""Message DTOs for API request/response."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from branchchat.domain.entities.message import Message


class MessageDTO(BaseModel):
    """DTO for message data returned to frontend."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    conversation_id: str
    sender_id: str
    text_content: Optional[str] = None
    video_url: Optional[str] = None
    timestamp: datetime
    branch_parent_message_id: Optional[str] = None

    @classmethod
    def from_entity(cls, message: Message) -> "MessageDTO":
        parent = message.branch_parent_message_id
        return cls(
            id=message.id.value,
            conversation_id=message.conversation_id.value,
            sender_id=message.sender_id.value,
            text_content=message.text_content,
            video_url=message.video_url,
            timestamp=message.timestamp,
            branch_parent_message_id=parent.value if parent else None,
        )
