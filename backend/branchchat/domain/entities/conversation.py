"""
Conversation Entity - A messaging thread between exactly two users.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

from branchchat.domain.exceptions.validation_error import InvalidParticipantsError
from branchchat.domain.value_objects.conversation_id import ConversationId
from branchchat.domain.value_objects.user_id import UserId


def normalize_participants(
    user_id_a: str | None, user_id_b: str | None
) -> tuple[UserId, UserId]:
    """Sort the pair so (A, B) and (B, A) resolve to the same conversation."""
    if not user_id_a or not user_id_b:
        raise InvalidParticipantsError()
    if user_id_a == user_id_b:
        raise InvalidParticipantsError("Cannot start a conversation with yourself.")
    first, second = sorted((user_id_a, user_id_b))
    return UserId(first), UserId(second)


@dataclass(frozen=True)
class Conversation:
    id: ConversationId
    participants: tuple[UserId, UserId]
    created_at: datetime

    def __post_init__(self):
        if len(self.participants) != 2 or self.participants[0] == self.participants[1]:
            raise ValueError("A conversation needs exactly two distinct participants")

    @classmethod
    def create(cls, participants: tuple[UserId, UserId]) -> Conversation:
        return cls(
            id=ConversationId(str(uuid4())),
            participants=participants,
            created_at=datetime.now(timezone.utc),
        )

    def is_between(self, participants: tuple[UserId, UserId]) -> bool:
        """Unordered pair comparison; legacy records may be stored unsorted."""
        return set(self.participants) == set(participants)
