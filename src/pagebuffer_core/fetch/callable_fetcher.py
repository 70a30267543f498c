"""Fetcher adapter for plain coroutine functions."""

from typing import Any, Awaitable, Callable, Dict, List, Optional

from ..interfaces import FetcherInterface
from ..utils.error_handling import LoadFailure

FetchFunction = Callable[[int, Dict[str, Any]], Awaitable[Optional[List[Dict[str, Any]]]]]


class CallableFetcher(FetcherInterface):
    """Wraps ``async def fn(position, options)`` as a fetcher.

    A function returning None signals a failed load.
    """

    def __init__(self, fn: FetchFunction):
        self.fn = fn

    async def fetch(self, position: int, options: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        records = await self.fn(position, options or {})
        if records is None:
            raise LoadFailure(position, "no data")
        return list(records)
