"""Fetchers for PageBuffer."""

from .page_source import JsonPageSource
from .http_fetcher import HttpFetcher
from .callable_fetcher import CallableFetcher

__all__ = [
    "JsonPageSource",
    "HttpFetcher",
    "CallableFetcher",
]
