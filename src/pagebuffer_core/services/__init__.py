"""Services for PageBuffer."""

from .base_service import BaseService
from .logging_service import LoggingService, get_logging_service
from .buffer_cache_service import BufferCacheService

__all__ = [
    # Base classes
    "BaseService",

    # Core services
    "LoggingService",
    "get_logging_service",
    "BufferCacheService",
]
