"""
Record Store Port - Durable ordered collection of JSON-serializable records.
Implementation: branchchat/infrastructure/persistence/json_record_store.py

One store per entity type. load() returns records in insertion order;
save() overwrites the whole collection. Writers must hold write_lock for the
full read-modify-write cycle.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Any

Record = dict[str, Any]


class RecordStore(ABC):
    write_lock: asyncio.Lock

    @abstractmethod
    def load(self) -> list[Record]:
        """Raises StorageUnavailableError if the backing file cannot be read."""
        ...

    @abstractmethod
    def save(self, records: list[Record]) -> None: ...

    @abstractmethod
    def ensure_exists(self) -> None: ...
