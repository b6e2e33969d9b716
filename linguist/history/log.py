"""
Activity Log

Append-only, newest-first log of completed operations, persisted as one JSON
blob under a single key of a KeyValueStore.

Limitations:
- append() is a full read-modify-write of the blob. Inside one event loop it
  never awaits, so appends cannot interleave; two processes sharing the same
  store can still lose an update.
- There is no size cap; the blob grows with every operation until clear().
"""

import json
import logging
import time
import uuid
from datetime import datetime
from typing import List

from pydantic import ValidationError

from linguist.config import STORAGE_KEY
from linguist.core.models import ActivityRecord, AnalyticsView, RecordKind
from linguist.history.analytics import compute_analytics
from linguist.history.store import KeyValueStore

logger = logging.getLogger(__name__)


class ActivityLog:
    """
    Log of ActivityRecords backed by an injected store.

    Usage:
        log = ActivityLog(FileKeyValueStore(HISTORY_DIR))
        log.append(source_text="hola", translated_text="hello",
                   source_lang="es", target_lang="en", kind=RecordKind.TEXT)
        log.list()[0].translated_text  # "hello"
    """

    def __init__(self, store: KeyValueStore, key: str = STORAGE_KEY):
        self.store = store
        self.key = key

    def append(
        self,
        *,
        source_text: str,
        translated_text: str,
        source_lang: str,
        target_lang: str,
        kind: RecordKind,
    ) -> ActivityRecord:
        """Create a record (new id + timestamp), prepend it, and persist the log."""
        record = ActivityRecord(
            id=str(uuid.uuid4()),
            source_text=source_text,
            translated_text=translated_text,
            source_lang=source_lang,
            target_lang=target_lang,
            timestamp=int(time.time() * 1000),
            kind=kind,
        )
        records = self.list()
        records.insert(0, record)
        self._write(records)
        logger.info(f"Logged {record.kind.value} record {record.id[:8]} ({len(records)} total)")
        return record

    def clear(self) -> None:
        """Remove every record. Irreversible."""
        self.store.delete(self.key)
        logger.info("Activity log cleared")

    def search(self, term: str) -> List[ActivityRecord]:
        """Records whose source or translated text contains term (case-insensitive)."""
        records = self.list()
        if not term:
            return records
        return [record for record in records if record.matches(term)]

    def compute_analytics(self, now: datetime | None = None) -> AnalyticsView:
        """Derive the analytics view from the full log."""
        return compute_analytics(self.list(), now=now)

    def _write(self, records: List[ActivityRecord]) -> None:
        blob = json.dumps([record.to_storage() for record in records], ensure_ascii=False)
        self.store.set(self.key, blob)

    def list(self) -> List[ActivityRecord]:
        """All records, newest first. Missing or unreadable storage reads as empty."""
        blob = self.store.get(self.key)
        if not blob:
            return []
        try:
            raw = json.loads(blob)
            return [ActivityRecord.model_validate(item) for item in raw]
        except (ValueError, TypeError, ValidationError) as e:
            logger.warning(f"Ignoring unreadable activity log under '{self.key}': {e}")
            return []

    def __len__(self) -> int:
        return len(self.list())

    def __repr__(self) -> str:
        return f"ActivityLog(key={self.key!r})"
