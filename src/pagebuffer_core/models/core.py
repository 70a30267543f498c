"""Core model classes and types for PageBuffer.

This module contains the data models shared by the cache, the record stores
and the fetchers: records, window configuration and fetcher configuration.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union
from pydantic import BaseModel, Field, model_validator

from .config import (
    DEFAULT_BUFFER,
    DEFAULT_MIN,
    DEFAULT_MAX,
    DEFAULT_BASE_URL,
    DEFAULT_PAGE_LIMIT,
    DEFAULT_FETCH_TIMEOUT,
)


@dataclass
class Record:
    """A single record held by a record store."""
    id: str
    data: Dict[str, Any] = field(default_factory=dict)
    position: Optional[int] = None


class WindowConfig(BaseModel):
    """Window parameters of a BufferCache.

    Validated once at construction. Later assignments are not validated.
    """

    buffer: int = Field(default=DEFAULT_BUFFER, ge=0)
    min: int = DEFAULT_MIN
    max: Union[int, float] = DEFAULT_MAX

    @model_validator(mode="after")
    def check_bounds(self) -> "WindowConfig":
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max})")
        return self


class FetcherConfig(BaseModel):
    """Settings for the HTTP fetcher."""

    base_url: str = DEFAULT_BASE_URL
    limit: int = Field(default=DEFAULT_PAGE_LIMIT, ge=0)
    timeout: float = Field(default=DEFAULT_FETCH_TIMEOUT, gt=0)
