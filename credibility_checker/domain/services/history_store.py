"""Bounded, persisted history of fact-check records."""

import json
import logging
import time
from typing import List, Optional
from uuid import uuid4

from pydantic import TypeAdapter, ValidationError

from ..errors import PersistenceReadError
from ..models.fact_check_record import FactCheckDraft, FactCheckRecord
from ..ports.key_value_storage import KeyValueStorage

logger = logging.getLogger(__name__)

HISTORY_STORAGE_KEY = "factcheck-history"
DEFAULT_HISTORY_LIMIT = 50

_records_adapter = TypeAdapter(List[FactCheckRecord])


class HistoryStore:
    """Most-recent-first list of fact-check records kept in one storage blob.

    Every save prepends the new record and evicts everything beyond ``limit``.
    An unreadable blob is treated as an empty history.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        limit: int = DEFAULT_HISTORY_LIMIT,
        storage_key: str = HISTORY_STORAGE_KEY,
    ):
        """Initialize the store.

        Args:
            storage: Backing key-value storage
            limit: Maximum number of records kept
            storage_key: Key of the history blob
        """
        if limit < 1:
            raise ValueError("History limit must be at least 1")
        self._storage = storage
        self._limit = limit
        self._key = storage_key

    @property
    def limit(self) -> int:
        return self._limit

    def save(self, draft: FactCheckDraft) -> FactCheckRecord:
        """Store a new record and return it with its id and timestamp.

        Args:
            draft: Result to store

        Returns:
            The stored record
        """
        record = FactCheckRecord(
            query=draft.query,
            is_url_query=draft.is_url_query,
            verdict=draft.verdict,
            id=str(uuid4()),
            created_at=int(time.time() * 1000),
        )
        history = [record] + self.list()
        self._write(history[: self._limit])
        logger.debug(f"💾 Saved fact check {record.id} ({record.verdict.rating.value})")
        return record

    def list(self) -> List[FactCheckRecord]:
        """Return stored records, most recent first."""
        raw = self._storage.get_item(self._key)
        if not raw:
            return []

        try:
            return self._decode(raw)
        except PersistenceReadError as e:
            logger.warning(f"⚠️ Discarding unreadable history: {e}")
            return []

    def get(self, record_id: str) -> Optional[FactCheckRecord]:
        """Look up a record by id."""
        for record in self.list():
            if record.id == record_id:
                return record
        return None

    def delete_by_id(self, record_id: str) -> None:
        """Remove the record with the given id, if present."""
        history = self.list()
        remaining = [record for record in history if record.id != record_id]
        if len(remaining) == len(history):
            logger.debug(f"No fact check with id {record_id} to delete")
            return
        self._write(remaining)
        logger.info(f"🗑️ Deleted fact check {record_id}")

    def clear(self) -> None:
        """Remove all records."""
        self._storage.remove_item(self._key)
        logger.info("🗑️ Cleared fact check history")

    def _decode(self, raw: str) -> List[FactCheckRecord]:
        try:
            return _records_adapter.validate_python(json.loads(raw))
        except (ValueError, ValidationError) as e:
            raise PersistenceReadError(f"History under '{self._key}' is not valid: {e}") from e

    def _write(self, records: List[FactCheckRecord]) -> None:
        payload = _records_adapter.dump_json(records, by_alias=True)
        self._storage.set_item(self._key, payload.decode("utf-8"))
