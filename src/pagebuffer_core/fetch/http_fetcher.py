"""HTTP fetcher built on httpx."""

from typing import Any, Dict, List, Optional
import httpx
from loguru import logger

from ..interfaces import FetcherInterface, PageSource
from ..models.config import DEFAULT_FETCH_TIMEOUT
from ..utils.error_handling import handle_fetch_errors


class HttpFetcher(FetcherInterface):
    """Fetches pages over HTTP.

    URL building and response decoding are delegated to a PageSource, so the
    same fetcher serves any paged JSON endpoint.
    """

    def __init__(
        self,
        source: PageSource,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_FETCH_TIMEOUT
    ):
        """Initialize the HTTP fetcher.

        Args:
            source: PageSource building URLs and parsing responses
            client: Shared AsyncClient (one is created and owned otherwise)
            timeout: Request timeout in seconds for an owned client
        """
        self.source = source
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=timeout)
        self.total_requests = 0

    @handle_fetch_errors("fetch page")
    async def fetch(self, position: int, options: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        url = self.source.build_url(position, options)
        self.total_requests += 1
        logger.debug(f"HttpFetcher: GET {url}")

        response = await self.client.get(url)
        response.raise_for_status()
        return self.source.parse_response(response.json())

    async def close(self) -> None:
        """Close the HTTP client if this fetcher created it."""
        if self._owns_client:
            await self.client.aclose()
