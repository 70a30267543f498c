"""Record store interface for PageBuffer."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Iterable, List, Optional
from ..models.core import Record


class RecordStoreInterface(ABC):
    """Base interface for the record stores a BufferCache writes into."""

    @abstractmethod
    def add_records(self, records: Iterable[Dict[str, Any]], tag: Optional[int] = None) -> List[str]:
        """Insert records.

        Args:
            records: Raw record payloads
            tag: Position the records were loaded for

        Returns:
            IDs of the newly created records, in insertion order
        """
        pass

    @abstractmethod
    def remove_records(self, ids: Iterable[str]) -> List[Record]:
        """Remove records by ID.

        Args:
            ids: IDs of the records to remove

        Returns:
            The records that were actually removed
        """
        pass

    @abstractmethod
    def reset_all(self) -> None:
        """Remove every record.

        Reset listeners are notified before the records are dropped.
        """
        pass

    @abstractmethod
    def get_records_by_ids(self, ids: Iterable[str]) -> List[Record]:
        """Get records by ID, in the order of ``ids``. Unknown IDs are skipped."""
        pass

    @abstractmethod
    def add_reset_listener(self, callback: Callable[[], None]) -> None:
        """Register a callback invoked at the start of every reset."""
        pass

    @abstractmethod
    def remove_reset_listener(self, callback: Callable[[], None]) -> bool:
        """Unregister a reset callback.

        Returns:
            True if the callback was registered, False otherwise
        """
        pass
