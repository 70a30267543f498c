"""PageBuffer: a windowed read-ahead cache for paged remote data."""

from .buffer import BufferCache, WindowCalculator, PositionIndex
from .fetch import CallableFetcher, HttpFetcher, JsonPageSource
from .interfaces import FetcherInterface, PageSource, RecordStoreInterface
from .models import (
    Record,
    WindowConfig,
    FetcherConfig,
    PositionChanged,
    Drained,
    RecordsAdded,
    RecordsRemoved,
    StoreReset,
)
from .store import MemoryRecordStore
from .utils.error_handling import (
    PageBufferError,
    InvalidOperationError,
    ConfigurationError,
    LoadFailure,
)

__version__ = "0.1.0"

__all__ = [
    "BufferCache",
    "WindowCalculator",
    "PositionIndex",
    "CallableFetcher",
    "HttpFetcher",
    "JsonPageSource",
    "FetcherInterface",
    "PageSource",
    "RecordStoreInterface",
    "Record",
    "WindowConfig",
    "FetcherConfig",
    "PositionChanged",
    "Drained",
    "RecordsAdded",
    "RecordsRemoved",
    "StoreReset",
    "MemoryRecordStore",
    "PageBufferError",
    "InvalidOperationError",
    "ConfigurationError",
    "LoadFailure",
]
