"""Models package for PageBuffer.

This module provides a unified interface to all data models used in PageBuffer.
It re-exports classes from the core, events and config modules.
"""

# Core models
from .core import (
    Record,
    WindowConfig,
    FetcherConfig,
)

# Events
from .events import (
    PositionChanged,
    Drained,
    RecordsAdded,
    RecordsRemoved,
    StoreReset,
)

# Configuration constants
from .config import (
    DEFAULT_BUFFER,
    DEFAULT_MIN,
    DEFAULT_MAX,
    DEFAULT_BASE_URL,
    DEFAULT_PAGE_LIMIT,
    DEFAULT_FETCH_TIMEOUT,
    DEFAULT_LOG_FILE,
)

__all__ = [
    # Core models
    "Record",
    "WindowConfig",
    "FetcherConfig",

    # Events
    "PositionChanged",
    "Drained",
    "RecordsAdded",
    "RecordsRemoved",
    "StoreReset",

    # Configuration constants
    "DEFAULT_BUFFER",
    "DEFAULT_MIN",
    "DEFAULT_MAX",
    "DEFAULT_BASE_URL",
    "DEFAULT_PAGE_LIMIT",
    "DEFAULT_FETCH_TIMEOUT",
    "DEFAULT_LOG_FILE",
]
