"""Position index: which record IDs each loaded position produced."""

from typing import Dict, Iterator, List, Optional


class PositionIndex:
    """Mapping from position to the IDs of the records its load created.

    Every record added by a positional load is registered under exactly one
    position, so evicting a position removes exactly its records.
    """

    def __init__(self):
        self._by_position: Dict[int, List[str]] = {}

    def register(self, position: int, record_ids: List[str]) -> None:
        self._by_position[position] = list(record_ids)

    def get(self, position: int) -> Optional[List[str]]:
        ids = self._by_position.get(position)
        return list(ids) if ids is not None else None

    def pop(self, position: int) -> Optional[List[str]]:
        return self._by_position.pop(position, None)

    def positions(self) -> List[int]:
        """Get the tracked positions in registration order."""
        return list(self._by_position)

    def clear(self) -> None:
        self._by_position.clear()

    def __contains__(self, position: object) -> bool:
        return position in self._by_position

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._by_position))

    def __len__(self) -> int:
        return len(self._by_position)
