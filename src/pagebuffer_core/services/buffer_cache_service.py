"""BufferCache service for PageBuffer.

This service wires a record store, an HTTP fetcher and a BufferCache from the
Hydra configuration and drives the cache through a sequence of positions.
"""

import asyncio
from typing import Any, Dict, List, Optional
import httpx
from omegaconf import DictConfig
from loguru import logger

from ..buffer import BufferCache
from ..fetch import HttpFetcher, JsonPageSource
from ..models.events import Drained
from ..store import MemoryRecordStore
from ..utils.config import config_manager, get_window_config, get_fetcher_config
from .base_service import BaseService


class BufferCacheService(BaseService):
    """Owns one BufferCache and its collaborators."""

    def __init__(
        self,
        drain_timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None
    ):
        """Initialize the service.

        Args:
            drain_timeout: Seconds to wait for each window to settle in ``walk``
            client: AsyncClient for the fetcher (the fetcher creates one otherwise)
        """
        super().__init__("buffer_cache")
        self.drain_timeout = drain_timeout
        self.client = client
        self.store: Optional[MemoryRecordStore] = None
        self.fetcher: Optional[HttpFetcher] = None
        self.cache: Optional[BufferCache] = None

    async def initialize(self, cfg: Optional[DictConfig] = None) -> bool:
        """Build the store, fetcher and cache.

        Args:
            cfg: Configuration with ``window`` and ``fetcher`` sections

        Returns:
            True if initialization was successful, False otherwise
        """
        if cfg is not None:
            self.set_config(cfg)
            config_manager.set_config(cfg)

        try:
            window_config = get_window_config()
            fetcher_config = get_fetcher_config()
        except Exception as e:
            logger.error(f"Failed to initialize buffer cache service: {e}")
            return False

        source = JsonPageSource(base_url=fetcher_config.base_url, limit=fetcher_config.limit)
        self.store = MemoryRecordStore()
        self.fetcher = HttpFetcher(source, client=self.client, timeout=fetcher_config.timeout)
        self.cache = BufferCache(self.store, self.fetcher, window_config)
        self.cache.on(Drained, self._log_drain)

        self._mark_initialized()
        return True

    def _log_drain(self, event: Drained) -> None:
        logger.info(
            f"BufferCacheService: Window settled at position {self.cache.get_position()} "
            f"with positions {sorted(event.positions)} ({len(self.store)} records)")

    async def walk(self, positions: List[int]) -> List[List[int]]:
        """Move the cache through ``positions``, waiting for each window to settle.

        A step settles once every load it issued has resolved. Steps that only
        evict, and steps whose last load fails, settle without a drain.

        Returns:
            The sorted loaded positions after each step

        Raises:
            asyncio.TimeoutError: If a step does not settle within ``drain_timeout``
        """
        if self.cache is None:
            raise RuntimeError("BufferCacheService is not initialized")

        windows = []
        for position in positions:
            self.cache.position(position)
            if self.cache.pending():
                await asyncio.wait_for(self.cache.settle(), self.drain_timeout)
            windows.append(sorted(self.cache.loaded()))
        return windows

    def get_stats(self) -> Dict[str, Any]:
        stats: Dict[str, Any] = {"initialized": self.is_initialized()}
        if self.cache is not None:
            stats["cache"] = self.cache.get_stats()
            stats["records"] = len(self.store)
            stats["requests"] = self.fetcher.total_requests
        return stats

    async def shutdown(self) -> bool:
        """Settle outstanding loads and close the HTTP client.

        Returns:
            True if shutdown was successful, False otherwise
        """
        try:
            if self.cache is not None:
                await self.cache.close()
            if self.fetcher is not None:
                await self.fetcher.close()
            self._mark_shutdown()
            return True
        except Exception as e:
            logger.error(f"Failed to shutdown buffer cache service: {e}")
            return False
