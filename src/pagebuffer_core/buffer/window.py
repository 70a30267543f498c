"""Neighbor window arithmetic for the BufferCache."""

from typing import List, Optional, Tuple

from ..models.core import WindowConfig


class WindowCalculator:
    """Computes the positions around a focus position.

    Reads ``buffer``, ``min`` and ``max`` from the shared WindowConfig on every
    call, so changes to the config take effect on the next computation.
    """

    def __init__(self, config: WindowConfig):
        self.config = config

    def neighbors(self, pos: Optional[int]) -> List[int]:
        """Get the neighbor positions of ``pos``.

        Positions are interleaved by radius: pos-1, pos+1, pos-2, pos+2, ...
        Anything outside ``[min, max]`` is skipped. The focus itself is not
        included.
        """
        if pos is None:
            return []

        config = self.config
        neighbors = []
        for i in range(1, config.buffer + 1):
            if pos - i >= config.min:
                neighbors.append(pos - i)
            if pos + i <= config.max:
                neighbors.append(pos + i)
        return neighbors

    def bounds(self, pos: int) -> Tuple[float, float]:
        config = self.config
        return max(config.min, pos - config.buffer), min(config.max, pos + config.buffer)

    def is_neighbor(self, candidate: int, pos: Optional[int]) -> bool:
        """Check whether ``candidate`` lies inside the clamped window of ``pos``.

        The focus position counts as inside its own window.
        """
        if pos is None:
            return False
        low, high = self.bounds(pos)
        return low <= candidate <= high

    def window(self, pos: Optional[int]) -> Tuple[int, ...]:
        """Get every position a settled cache holds for ``pos``, sorted."""
        if pos is None:
            return ()
        return tuple(sorted([pos] + self.neighbors(pos)))
