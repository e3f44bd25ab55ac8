"""
JSON Message Repository Implementation.

Record layout (messages.json):
    {
        "id": "…",
        "conversationId": "…",
        "senderId": "…",
        "textContent": "hi" | null,
        "videoUrl": "/videos/…" | null,
        "timestamp": "ISO-8601",
        "branchParentMessageId": null
    }

Messages are appended in arrival order, which can differ from timestamp
order (retried requests), so reads sort by timestamp. The sort is stable:
equal timestamps keep file order.
"""

import logging

from branchchat.domain.entities.message import Message
from branchchat.domain.exceptions import StorageUnavailableError
from branchchat.domain.ports.record_store import Record, RecordStore
from branchchat.domain.ports.repositories import MessageRepository
from branchchat.domain.value_objects.conversation_id import ConversationId
from branchchat.domain.value_objects.message_id import MessageId
from branchchat.domain.value_objects.user_id import UserId
from branchchat.infrastructure.persistence.timestamps import format_timestamp, parse_timestamp

logger = logging.getLogger(__name__)


class JsonMessageRepository(MessageRepository):
    _store: RecordStore

    def __init__(self, store: RecordStore):
        self._store = store

    def _to_entity(self, record: Record) -> Message:
        parent = record.get("branchParentMessageId")
        return Message(
            id=MessageId(record["id"]),
            conversation_id=ConversationId(record["conversationId"]),
            sender_id=UserId(str(record["senderId"])),
            text_content=record.get("textContent"),
            video_url=record.get("videoUrl"),
            timestamp=parse_timestamp(record["timestamp"]),
            branch_parent_message_id=MessageId(parent) if parent else None,
        )

    def _to_record(self, message: Message) -> Record:
        parent = message.branch_parent_message_id
        return {
            "id": message.id.value,
            "conversationId": message.conversation_id.value,
            "senderId": message.sender_id.value,
            "textContent": message.text_content,
            "videoUrl": message.video_url,
            "timestamp": format_timestamp(message.timestamp),
            "branchParentMessageId": parent.value if parent else None,
        }

    async def get_by_conversation(
        self, conversation_id: ConversationId
    ) -> list[Message]:
        try:
            records = self._store.load()
        except StorageUnavailableError as e:
            logger.warning(f"[MessageRepository] Treating store as empty: {e}")
            return []

        messages = [
            self._to_entity(record)
            for record in records
            if record.get("conversationId") == conversation_id.value
        ]
        return sorted(messages, key=lambda m: m.timestamp)

    async def add(self, message: Message) -> None:
        async with self._store.write_lock:
            records = self._store.load()
            records.append(self._to_record(message))
            self._store.save(records)
