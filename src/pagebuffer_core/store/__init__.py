"""Record stores for PageBuffer."""

from .memory_store import MemoryRecordStore

__all__ = [
    "MemoryRecordStore",
]
