"""Utility functions for PageBuffer."""

from .error_handling import (
    PageBufferError,
    InvalidOperationError,
    ConfigurationError,
    LoadFailure,
    handle_fetch_errors,
)
from .events import EventEmitter

# Configuration utilities
from .config import (
    config_manager,
    ConfigManager,
    get_window_config,
    get_fetcher_config,
)

__all__ = [
    # From error_handling
    "PageBufferError",
    "InvalidOperationError",
    "ConfigurationError",
    "LoadFailure",
    "handle_fetch_errors",
    # From events
    "EventEmitter",
    # From config
    "config_manager",
    "ConfigManager",
    "get_window_config",
    "get_fetcher_config",
]
