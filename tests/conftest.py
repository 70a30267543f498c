"""
Shared pytest fixtures for PageBuffer tests.

The ColorFetcher reproduces the paged color list used to exercise the cache:
100 colors served ``limit`` per page.
"""

import asyncio
from typing import Any, Dict, List, Optional, Set

import pytest

from pagebuffer_core.buffer import BufferCache
from pagebuffer_core.interfaces import FetcherInterface
from pagebuffer_core.store import MemoryRecordStore
from pagebuffer_core.utils.error_handling import LoadFailure

TOTAL_COLORS = 100


def make_colors(total: int = TOTAL_COLORS) -> List[Dict[str, Any]]:
    return [{"color": f"#{(i * 167772) % 16777215:06x}", "index": i} for i in range(total)]


class ColorFetcher(FetcherInterface):
    """In-process fetcher over a fixed color list.

    Responses resolve after a small position dependent delay so that loads
    finish out of order. Positions in ``failing`` raise LoadFailure. Positions
    in ``gated`` wait until ``release`` is called for them.
    """

    def __init__(self, limit: int = 10, failing: Optional[Set[int]] = None):
        self.limit = limit
        self.colors = make_colors()
        self.failing = set(failing or ())
        self.calls: List[int] = []
        self._gates: Dict[int, asyncio.Event] = {}

    def gate(self, *positions: int) -> None:
        for position in positions:
            self._gates[position] = asyncio.Event()

    def release(self, *positions: int) -> None:
        for position in positions:
            self._gates.pop(position).set()

    async def fetch(self, position: int, options: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        self.calls.append(position)
        gate = self._gates.get(position)
        if gate is not None:
            await gate.wait()
        else:
            await asyncio.sleep(((position * 7) % 5) * 0.001)

        if position in self.failing:
            raise LoadFailure(position, "server error")

        limit = (options or {}).get("limit", self.limit)
        start = limit * position
        return self.colors[start:start + limit]


async def wait_until(predicate, timeout: float = 1.0) -> None:
    """Poll ``predicate`` on the event loop until it holds."""
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        if loop.time() > deadline:
            raise AssertionError("condition not met in time")
        await asyncio.sleep(0.001)


@pytest.fixture
def store() -> MemoryRecordStore:
    return MemoryRecordStore()


@pytest.fixture
def fetcher() -> ColorFetcher:
    return ColorFetcher()


@pytest.fixture
def make_cache(store, fetcher):
    """Factory building a BufferCache over the shared store and fetcher."""
    def _make(**options: Any) -> BufferCache:
        return BufferCache(store, fetcher, **options)
    return _make
