"""Error types and error handling utilities for PageBuffer."""

from loguru import logger
import functools
from typing import Any, Awaitable, Callable, Optional, TypeVar

import httpx


T = TypeVar('T')


class PageBufferError(Exception):
    """Base class for all PageBuffer errors."""


class InvalidOperationError(PageBufferError):
    """Raised when an operation is not allowed on a component."""


class ConfigurationError(PageBufferError):
    """Raised when a component is constructed with invalid settings."""


class LoadFailure(PageBufferError):
    """Raised by fetchers when a page could not be loaded."""

    def __init__(self, position: int, reason: Optional[str] = None):
        self.position = position
        self.reason = reason
        message = f"Failed to load position {position}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


def handle_fetch_errors(operation_name: str) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Decorator to handle fetch errors.

    This decorator catches transport and decoding errors of a fetch coroutine
    and converts them to LoadFailure. The decorated coroutine must take the
    position as its first argument after ``self``.

    Args:
        operation_name: Name of the operation for logging purposes

    Returns:
        The decorated function
    """
    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(self: Any, position: int, *args: Any, **kwargs: Any) -> T:
            try:
                return await func(self, position, *args, **kwargs)
            except LoadFailure:
                raise
            except httpx.HTTPStatusError as e:
                logger.warning(
                    f"Failed to {operation_name} for position {position}: "
                    f"HTTP {e.response.status_code}")
                raise LoadFailure(position, f"HTTP {e.response.status_code}") from e
            except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
                logger.warning(f"Failed to {operation_name} for position {position}: {e}")
                raise LoadFailure(position, str(e)) from e
        return wrapper
    return decorator
