"""Event types published by the cache and the record stores."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .core import Record


@dataclass(frozen=True)
class PositionChanged:
    """Fired at the end of every position change."""
    position: int
    options: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Drained:
    """Fired when no positional load is in flight anymore."""
    positions: List[int] = field(default_factory=list)


@dataclass(frozen=True)
class RecordsAdded:
    records: List[Record] = field(default_factory=list)
    tag: Optional[int] = None


@dataclass(frozen=True)
class RecordsRemoved:
    records: List[Record] = field(default_factory=list)


@dataclass(frozen=True)
class StoreReset:
    pass
