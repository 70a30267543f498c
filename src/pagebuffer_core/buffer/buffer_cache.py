"""BufferCache implementation for PageBuffer.

The BufferCache keeps a sliding window of loaded pages around a focus
position. Moving the focus loads the pages that entered the window and
evicts the pages that left it:

- Loads are issued as asyncio tasks; at most one is in flight per position
- Responses for positions that left the window in the meantime are ignored
- Responses for requests issued before a store reset are discarded
- A Drained event fires whenever the last in-flight load settles
"""

import asyncio
from typing import Any, Callable, Dict, List, Optional, Set, Type, TypeVar
from loguru import logger
from pydantic import ValidationError

from ..interfaces import FetcherInterface, RecordStoreInterface
from ..models.core import Record, WindowConfig
from ..models.events import Drained, PositionChanged
from ..utils.error_handling import ConfigurationError, InvalidOperationError, LoadFailure
from ..utils.events import EventEmitter
from .position_index import PositionIndex
from .window import WindowCalculator

E = TypeVar('E')


class BufferCache:
    """Windowed read-ahead cache over a record store.

    All methods must be called from the event loop thread. ``load`` and
    ``position`` need a running event loop to schedule fetches.
    """

    def __init__(
        self,
        store: RecordStoreInterface,
        fetcher: FetcherInterface,
        config: Optional[WindowConfig] = None,
        **options: Any
    ):
        """Initialize the BufferCache.

        Args:
            store: Record store the loaded records are written into
            fetcher: Fetcher used to load a position
            config: Window configuration (defaults: buffer=1, min=0, max=inf)
            **options: Overrides for ``buffer``, ``min`` and ``max``
        """
        try:
            if config is None:
                config = WindowConfig(**options)
            elif options:
                config = WindowConfig(**{**config.model_dump(), **options})
        except ValidationError as e:
            raise ConfigurationError(f"Invalid window configuration: {e}") from e

        self.store = store
        self.fetcher = fetcher
        self.config = config
        self.window = WindowCalculator(config)
        self.events = EventEmitter("BufferCache")

        self._pos: Optional[int] = None
        self._index = PositionIndex()
        # position -> reset generation the request was issued in
        self._pending: Dict[int, int] = {}
        self._generation = 0
        self._tasks: Set[asyncio.Task] = set()
        self._drain_waiters: List[asyncio.Future] = []

        # Statistics
        self.total_loads = 0
        self.total_failures = 0
        self.total_stale = 0
        self.total_aborted = 0
        self.total_evictions = 0
        self.total_drains = 0

        self.store.add_reset_listener(self._on_store_reset)

        logger.info(
            f"BufferCache: Initialized with buffer={config.buffer}, "
            f"min={config.min}, max={config.max}")

    def on(self, event_type: Type[E], handler: Callable[[E], None]) -> Callable[[], None]:
        """Subscribe to PositionChanged or Drained events.

        Returns:
            A callable that removes the subscription
        """
        return self.events.subscribe(event_type, handler)

    # Position protocol

    def position(self, new_position: int, **options: Any) -> None:
        """Move the focus to ``new_position``.

        Loads the focus and every neighbor not already loaded or pending,
        evicts the cached positions that are no longer neighbors and emits
        PositionChanged. Setting the current position again does nothing.

        Args:
            new_position: New focus position
            **options: Passed to the fetcher for neighbor loads and carried
                on the PositionChanged event
        """
        if self._pos == new_position:
            return

        self._pos = new_position

        cached = self._index.positions()
        pending = list(self._pending)
        loaded = set(cached) | set(pending)
        neighbor = self.window.neighbors(new_position)
        neighbor_set = set(neighbor)

        to_load = [pos for pos in neighbor if pos not in loaded]
        to_unload = [pos for pos in cached if pos not in neighbor_set and pos != new_position]

        logger.debug(
            f"BufferCache: Position {new_position}, load={to_load}, "
            f"unload={to_unload}, pending={pending}")

        if new_position not in loaded:
            self.load(new_position)

        for pos in to_unload:
            self.unload(pos)

        for pos in to_load:
            self.load(pos, options)

        self.events.emit(PositionChanged(position=new_position, options=dict(options)))

    def get_position(self) -> Optional[int]:
        """Get the current focus position."""
        return self._pos

    def get_neighbors(self) -> List[int]:
        """Get the neighbor positions of the current focus."""
        return self.window.neighbors(self._pos)

    def is_neighbor(self, position: int) -> bool:
        """Check whether ``position`` is inside the current window."""
        return self.window.is_neighbor(position, self._pos)

    # Loading

    def load(self, position: int, options: Optional[Dict[str, Any]] = None) -> Optional[asyncio.Task]:
        """Start loading ``position`` unless a load for it is already in flight.

        Args:
            position: Position to load
            options: Per-call options passed to the fetcher

        Returns:
            The task running the load, or None if the position was pending
        """
        if position in self._pending:
            return None

        loop = asyncio.get_running_loop()
        generation = self._generation
        self._pending[position] = generation
        self.total_loads += 1

        task = loop.create_task(self._load(position, generation, dict(options or {})))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _load(self, position: int, generation: int, options: Dict[str, Any]) -> None:
        try:
            records = await self.fetcher.fetch(position, options)
        except asyncio.CancelledError:
            self._fail(position, generation, "cancelled")
            raise
        except LoadFailure as e:
            self._fail(position, generation, e.reason or str(e))
        except Exception as e:
            logger.error(f"BufferCache: Unexpected fetch error for position {position}: {e}", exc_info=True)
            self._fail(position, generation, str(e))
        else:
            self._add(position, generation, records)

    def _fail(self, position: int, generation: int, reason: str) -> None:
        # TODO: retry policy (attempt count and backoff) once fetchers report transient errors
        if generation != self._generation:
            return
        self._pending.pop(position, None)
        self.total_failures += 1
        logger.warning(f"BufferCache: Load failed for position {position}: {reason}")

    def _add(self, position: int, generation: int, records: List[Dict[str, Any]]) -> None:
        if generation != self._generation:
            self.total_aborted += 1
            logger.debug(f"BufferCache: Dropped response for position {position} issued before reset")
            return

        self._pending.pop(position, None)

        if self.window.is_neighbor(position, self._pos):
            ids = self.store.add_records(records, tag=position)
            self._index.register(position, ids)
            logger.debug(f"BufferCache: Loaded position {position} ({len(ids)} records)")
        else:
            self.total_stale += 1
            logger.debug(f"BufferCache: Ignored stale response for position {position} (focus={self._pos})")

        if not self._pending:
            self._drain()

    def _drain(self) -> None:
        positions = self.loaded()
        self.total_drains += 1
        logger.debug(f"BufferCache: Drained with positions {positions}")

        self.events.emit(Drained(positions=list(positions)))

        waiters, self._drain_waiters = self._drain_waiters, []
        for waiter in waiters:
            if not waiter.done():
                waiter.set_result(list(positions))

    def fetch(self, *args: Any, **kwargs: Any) -> None:
        """Direct fetching is not supported.

        Every record must be attributable to one tracked position, so pages
        are only loaded through ``position``.

        Raises:
            InvalidOperationError: Always
        """
        raise InvalidOperationError("BufferCache does not support direct fetch, use position() instead")

    # Eviction

    def unload(self, position: int) -> None:
        """Remove the records loaded for ``position`` from the store."""
        ids = self._index.pop(position)
        if ids is None:
            return
        self.store.remove_records(ids)
        self.total_evictions += 1
        logger.debug(f"BufferCache: Unloaded position {position} ({len(ids)} records)")

    def _on_store_reset(self) -> None:
        for position in self._index.positions():
            self.unload(position)

        aborted = len(self._pending)
        self._index.clear()
        self._pending.clear()
        self._generation += 1
        logger.debug(
            f"BufferCache: Store reset, {aborted} pending loads aborted, "
            f"position {self._pos} kept")

    # Accessors

    def get_by_position(self, position: int) -> Optional[List[Record]]:
        """Get the records loaded for ``position``, or None if it is not loaded."""
        ids = self._index.get(position)
        if ids is None:
            return None
        return self.store.get_records_by_ids(ids)

    def loaded(self) -> List[int]:
        """Get the positions whose records are in the store."""
        return self._index.positions()

    def pending(self) -> List[int]:
        """Get the positions with a load in flight."""
        return list(self._pending)

    def is_pending(self, position: int) -> bool:
        return position in self._pending

    # Synchronization

    async def settle(self) -> None:
        """Wait until no load task is running."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def wait_for_drain(self, timeout: Optional[float] = None) -> List[int]:
        """Wait for the next Drained event.

        Args:
            timeout: Seconds to wait (None to wait forever)

        Returns:
            The positions carried by the Drained event

        Raises:
            asyncio.TimeoutError: If no drain happened in time
        """
        waiter = asyncio.get_running_loop().create_future()
        self._drain_waiters.append(waiter)
        try:
            return await asyncio.wait_for(waiter, timeout)
        finally:
            if waiter in self._drain_waiters:
                self._drain_waiters.remove(waiter)

    async def close(self) -> None:
        """Wait for in-flight loads and detach from the store."""
        await self.settle()
        self.store.remove_reset_listener(self._on_store_reset)
        for waiter in self._drain_waiters:
            waiter.cancel()
        self._drain_waiters.clear()
        logger.debug("BufferCache: Closed")

    def get_stats(self) -> Dict[str, Any]:
        """Get statistics about the cache."""
        return {
            "position": self._pos,
            "loaded": len(self._index),
            "pending": len(self._pending),
            "total_loads": self.total_loads,
            "total_failures": self.total_failures,
            "total_stale": self.total_stale,
            "total_aborted": self.total_aborted,
            "total_evictions": self.total_evictions,
            "total_drains": self.total_drains,
            "buffer": self.config.buffer,
            "min": self.config.min,
            "max": self.config.max,
        }
