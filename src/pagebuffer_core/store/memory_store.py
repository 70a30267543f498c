"""In-memory record store implementation."""

import uuid
from collections import OrderedDict
from typing import Any, Callable, Dict, Iterable, List, Optional
from loguru import logger

from ..interfaces import RecordStoreInterface
from ..models.core import Record
from ..models.events import RecordsAdded, RecordsRemoved, StoreReset
from ..utils.events import EventEmitter


class MemoryRecordStore(RecordStoreInterface):
    """Ordered in-memory record store.

    Records are kept in insertion order. Every mutation is published on
    ``events`` as RecordsAdded, RecordsRemoved or StoreReset so that a view
    layer can follow the store without polling it.
    """

    def __init__(self, id_factory: Optional[Callable[[], str]] = None):
        """Initialize the store.

        Args:
            id_factory: Callable producing unique record IDs (uuid4 hex by default)
        """
        self._records: "OrderedDict[str, Record]" = OrderedDict()
        self._reset_listeners: List[Callable[[], None]] = []
        self._id_factory = id_factory or (lambda: uuid.uuid4().hex)
        self.events = EventEmitter("MemoryRecordStore")

    def add_records(self, records: Iterable[Dict[str, Any]], tag: Optional[int] = None) -> List[str]:
        added = []
        for data in records:
            record = Record(id=self._id_factory(), data=dict(data), position=tag)
            self._records[record.id] = record
            added.append(record)

        if added:
            logger.debug(f"MemoryRecordStore: Added {len(added)} records (tag={tag})")
            self.events.emit(RecordsAdded(records=added, tag=tag))
        return [record.id for record in added]

    def remove_records(self, ids: Iterable[str]) -> List[Record]:
        removed = []
        for record_id in ids:
            record = self._records.pop(record_id, None)
            if record is not None:
                removed.append(record)

        if removed:
            logger.debug(f"MemoryRecordStore: Removed {len(removed)} records")
            self.events.emit(RecordsRemoved(records=removed))
        return removed

    def reset_all(self) -> None:
        # Listeners run first so they can still remove what they track
        for callback in list(self._reset_listeners):
            callback()

        dropped = len(self._records)
        self._records.clear()
        logger.debug(f"MemoryRecordStore: Reset, dropped {dropped} untracked records")
        self.events.emit(StoreReset())

    def get_records_by_ids(self, ids: Iterable[str]) -> List[Record]:
        return [self._records[record_id] for record_id in ids if record_id in self._records]

    def add_reset_listener(self, callback: Callable[[], None]) -> None:
        self._reset_listeners.append(callback)

    def remove_reset_listener(self, callback: Callable[[], None]) -> bool:
        if callback in self._reset_listeners:
            self._reset_listeners.remove(callback)
            return True
        return False

    @property
    def records(self) -> List[Record]:
        """Get all records in insertion order."""
        return list(self._records.values())

    def get(self, record_id: str) -> Optional[Record]:
        return self._records.get(record_id)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records
