"""Configuration constants for PageBuffer.

This module contains constants and default configuration values used throughout
PageBuffer. These constants define default behavior when not overridden
by user configuration.
"""

# Window defaults
DEFAULT_BUFFER = 1
DEFAULT_MIN = 0
DEFAULT_MAX = float("inf")

# Fetcher defaults
DEFAULT_BASE_URL = "http://127.0.0.1:3000/color"
DEFAULT_PAGE_LIMIT = 10
DEFAULT_FETCH_TIMEOUT = 10.0

# Logging
DEFAULT_LOG_FILE = "logs/pagebuffer.log"
