"""Buffer system for PageBuffer.

The buffer system keeps the pages around a focus position materialized in a
record store:

1. WindowCalculator:
   Computes the neighbor positions of a focus, clamped to [min, max]
2. PositionIndex:
   Remembers which record IDs each loaded position produced
3. BufferCache:
   Orchestrates loads and evictions as the focus moves, ignores stale
   responses and signals when a window has fully settled
"""

from .window import WindowCalculator
from .position_index import PositionIndex
from .buffer_cache import BufferCache

__all__ = [
    "WindowCalculator",
    "PositionIndex",
    "BufferCache",
]
