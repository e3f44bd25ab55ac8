"""
JSON Conversation Repository Implementation.

Record layout (conversations.json):
    {"id": "…", "participants": ["<lower id>", "<higher id>"], "createdAt": "ISO-8601"}

Participants are written sorted; matching compares unordered pairs so
records written in either order are found.
"""

import logging
from typing import Optional

from branchchat.domain.entities.conversation import Conversation
from branchchat.domain.exceptions import StorageUnavailableError
from branchchat.domain.ports.record_store import Record, RecordStore
from branchchat.domain.ports.repositories import ConversationRepository
from branchchat.domain.value_objects.conversation_id import ConversationId
from branchchat.domain.value_objects.user_id import UserId
from branchchat.infrastructure.persistence.timestamps import format_timestamp, parse_timestamp

logger = logging.getLogger(__name__)


class JsonConversationRepository(ConversationRepository):
    _store: RecordStore

    def __init__(self, store: RecordStore):
        self._store = store

    def _to_entity(self, record: Record) -> Conversation:
        first, second = record["participants"]
        return Conversation(
            id=ConversationId(record["id"]),
            participants=(UserId(str(first)), UserId(str(second))),
            created_at=parse_timestamp(record["createdAt"]),
        )

    def _to_record(self, conversation: Conversation) -> Record:
        return {
            "id": conversation.id.value,
            "participants": [p.value for p in conversation.participants],
            "createdAt": format_timestamp(conversation.created_at),
        }

    def _load_for_read(self) -> list[Record]:
        try:
            return self._store.load()
        except StorageUnavailableError as e:
            logger.warning(f"[ConversationRepository] Treating store as empty: {e}")
            return []

    def _find(
        self, records: list[Record], participants: tuple[UserId, UserId]
    ) -> Optional[Conversation]:
        for record in records:
            ids = record.get("participants") or []
            if len(ids) != 2 or str(ids[0]) == str(ids[1]):
                continue
            conversation = self._to_entity(record)
            if conversation.is_between(participants):
                return conversation
        return None

    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        for record in self._load_for_read():
            if record.get("id") == conversation_id.value:
                return self._to_entity(record)
        return None

    async def get_by_participant(self, user_id: UserId) -> list[Conversation]:
        return [
            self._to_entity(record)
            for record in self._load_for_read()
            if user_id.value in [str(p) for p in record.get("participants") or []]
        ]

    async def find_or_create(
        self, participants: tuple[UserId, UserId]
    ) -> tuple[Conversation, bool]:
        async with self._store.write_lock:
            records = self._store.load()
            existing = self._find(records, participants)
            if existing:
                return existing, False

            conversation = Conversation.create(participants)
            records.append(self._to_record(conversation))
            self._store.save(records)
            return conversation, True
