"""Conversation DTOs for API request/response."""

from datetime import datetime
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from branchchat.domain.entities.conversation import Conversation


class ConversationDTO(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    participants: list[str]
    created_at: datetime

    @classmethod
    def from_entity(cls, conversation: Conversation) -> "ConversationDTO":
        return cls(
            id=conversation.id.value,
            participants=[p.value for p in conversation.participants],
            created_at=conversation.created_at,
        )
