"""Base service interface for PageBuffer services.

This module provides a common interface for all services in PageBuffer.
"""

from abc import ABC, abstractmethod
from typing import Optional
from omegaconf import DictConfig
from loguru import logger


class BaseService(ABC):
    """Base class for all PageBuffer services.

    This class provides a common interface for service initialization,
    configuration, and lifecycle management.
    """

    def __init__(self, name: str):
        """Initialize the base service.

        Args:
            name: Name of the service
        """
        self.name = name
        self._initialized = False
        self._config: Optional[DictConfig] = None

    @abstractmethod
    async def initialize(self, cfg: Optional[DictConfig] = None) -> bool:
        """Initialize the service.

        Args:
            cfg: Configuration for the service

        Returns:
            True if initialization was successful, False otherwise
        """
        pass

    @abstractmethod
    async def shutdown(self) -> bool:
        """Shutdown the service gracefully.

        Returns:
            True if shutdown was successful, False otherwise
        """
        pass

    def is_initialized(self) -> bool:
        return self._initialized

    def set_config(self, cfg: DictConfig) -> None:
        self._config = cfg
        logger.debug(f"{self.name} service configuration updated")

    def _mark_initialized(self) -> None:
        self._initialized = True
        logger.info(f"{self.name} service initialized successfully")

    def _mark_shutdown(self) -> None:
        self._initialized = False
        logger.info(f"{self.name} service shutdown successfully")
