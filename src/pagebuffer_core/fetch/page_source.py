"""Page sources describing how a paged HTTP resource is addressed."""

from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

from ..interfaces import PageSource
from ..models.config import DEFAULT_PAGE_LIMIT


class JsonPageSource(PageSource):
    """Page source for JSON list endpoints.

    Requests ``{base_url}?page={position}&limit={limit}`` and expects a body
    of the form ``{"total": ..., "start": ..., "length": ..., "results": [...]}``.
    """

    def __init__(
        self,
        base_url: str,
        limit: int = DEFAULT_PAGE_LIMIT,
        results_key: str = "results"
    ):
        """Initialize the page source.

        Args:
            base_url: URL of the list endpoint, without query string
            limit: Number of records per page
            results_key: Key of the record list in the response body
        """
        self.base_url = base_url
        self.limit = limit
        self.results_key = results_key

    def build_url(self, position: int, options: Optional[Dict[str, Any]] = None) -> str:
        options = options or {}
        params = {"page": position, "limit": options.get("limit", self.limit)}
        return f"{self.base_url}?{urlencode(params)}"

    def parse_response(self, raw: Any) -> List[Dict[str, Any]]:
        if not isinstance(raw, dict):
            raise ValueError(f"Expected a JSON object, got {type(raw).__name__}")
        results = raw[self.results_key]
        if not isinstance(results, list):
            raise ValueError(f"'{self.results_key}' is not a list")
        return results
