"""Interfaces module for PageBuffer.

This module contains core interfaces and abstractions that are used
throughout PageBuffer without creating circular dependencies.
"""

# Store interfaces
from .store_interface import RecordStoreInterface

# Fetcher interfaces
from .fetcher_interface import FetcherInterface, PageSource

__all__ = [
    # Store interfaces
    "RecordStoreInterface",

    # Fetcher interfaces
    "FetcherInterface",
    "PageSource",
]
