"""
JSON Record Store - One flat JSON array file per entity type.

Guidelines:
- Implements RecordStore port from domain layer
- load() reads the whole file, save() rewrites the whole file (pretty-printed)
- ensure_exists() creates the storage directory and an empty array file
- Sync file I/O; cost is O(total records) per call, fine at proof-of-concept scale

Concurrency:
- Each store instance owns one asyncio.Lock (write_lock)
- Repositories hold it across the whole read-modify-write so concurrent
  requests cannot lose each other's updates
- The store must be a single shared instance per file (Scope.APP in the container)

Durability:
- save() writes a temp file next to the target and os.replace()s it in,
  so a crash mid-write leaves the previous version intact
"""

import asyncio
import json
import logging
import os
import tempfile

from branchchat.domain.exceptions.storage import StorageUnavailableError
from branchchat.domain.ports.record_store import Record, RecordStore

logger = logging.getLogger(__name__)


class JsonRecordStore(RecordStore):
    def __init__(self, path: str):
        self.path = path
        self.write_lock = asyncio.Lock()

    def ensure_exists(self) -> None:
        """Idempotently create the containing directory and an empty array file."""
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            if not os.path.exists(self.path):
                with open(self.path, "w", encoding="utf-8") as f:
                    json.dump([], f, indent=2)
                logger.info(f"[RecordStore] Created DB file: {self.path}")
        except OSError as e:
            raise StorageUnavailableError(self.path, str(e)) from e

    def load(self) -> list[Record]:
        self.ensure_exists()
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"[RecordStore] Error reading {self.path}: {e}")
            raise StorageUnavailableError(self.path, str(e)) from e

        if not isinstance(data, list):
            raise StorageUnavailableError(self.path, "expected a JSON array")
        return data

    def save(self, records: list[Record]) -> None:
        self.ensure_exists()
        directory = os.path.dirname(self.path) or "."
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(
                prefix=".tmp-", suffix=".json", dir=directory
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"[RecordStore] Error writing {self.path}: {e}")
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StorageUnavailableError(self.path, str(e)) from e

        logger.debug(f"[RecordStore] Saved {len(records)} records to {self.path}")
