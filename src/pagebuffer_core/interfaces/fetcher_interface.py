"""Fetcher and page source interfaces for PageBuffer."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class FetcherInterface(ABC):
    """Interface for asynchronous page fetchers.

    Retries and backoff are the fetcher's concern; the cache calls ``fetch``
    once per load.
    """

    @abstractmethod
    async def fetch(self, position: int, options: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """Fetch the records of one page.

        Args:
            position: Position of the page
            options: Per-call options passed through from the cache

        Returns:
            Raw record payloads

        Raises:
            LoadFailure: If the page could not be loaded
        """
        pass


class PageSource(ABC):
    """Describes how a remote paged resource is addressed and decoded."""

    @abstractmethod
    def build_url(self, position: int, options: Optional[Dict[str, Any]] = None) -> str:
        """Build the request URL for a position."""
        pass

    @abstractmethod
    def parse_response(self, raw: Any) -> List[Dict[str, Any]]:
        """Extract the record payloads from a decoded response body."""
        pass
