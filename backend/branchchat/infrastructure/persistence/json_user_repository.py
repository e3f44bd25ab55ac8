"""
JSON User Repository Implementation.

Record layout (users.json):
    {"id": "…", "username": "alice", "passwordHash": "$2b$10$…"}

Older stores use "hashedPassword" instead of "passwordHash";
both keys are accepted on read.
"""

import logging
from typing import Optional

from branchchat.domain.entities.user import User
from branchchat.domain.exceptions import DuplicateUsernameError, StorageUnavailableError
from branchchat.domain.ports.record_store import Record, RecordStore
from branchchat.domain.ports.repositories import UserRepository
from branchchat.domain.value_objects.user_id import UserId
from branchchat.domain.value_objects.username import Username

logger = logging.getLogger(__name__)


class JsonUserRepository(UserRepository):
    _store: RecordStore

    def __init__(self, store: RecordStore):
        self._store = store

    def _to_entity(self, record: Record) -> User:
        return User(
            id=UserId(str(record["id"])),
            username=Username(record["username"]),
            password_hash=record.get("passwordHash") or record["hashedPassword"],
        )

    def _to_record(self, user: User) -> Record:
        return {
            "id": user.id.value,
            "username": user.username.value,
            "passwordHash": user.password_hash,
        }

    def _load_for_read(self) -> list[Record]:
        try:
            return self._store.load()
        except StorageUnavailableError as e:
            logger.warning(f"[UserRepository] Treating user store as empty: {e}")
            return []

    async def get_by_username(self, username: Username) -> Optional[User]:
        for record in self._load_for_read():
            if record.get("username") == username.value:
                return self._to_entity(record)
        return None

    async def add(self, user: User) -> None:
        async with self._store.write_lock:
            records = self._store.load()
            if any(r.get("username") == user.username.value for r in records):
                raise DuplicateUsernameError()
            records.append(self._to_record(user))
            self._store.save(records)
