"""Configuration management for PageBuffer.

This module provides a simple configuration system for PageBuffer.
It uses Hydra's DictConfig directly without dataclass definitions,
allowing for more flexible configuration.

It also includes utilities for accessing configuration values.
"""

from loguru import logger
from typing import Dict, Any
from omegaconf import OmegaConf
from pydantic import ValidationError
import dotenv

from ..models.core import WindowConfig, FetcherConfig
from .error_handling import ConfigurationError

dotenv.load_dotenv()


def _get_config() -> Dict[str, Any]:
    """Get the configuration from the cache or load it.

    Returns:
        Configuration dictionary
    """
    return config_manager.get_config()


class ConfigManager:
    """Configuration manager for PageBuffer.

    This class provides a singleton instance for accessing the configuration.
    It expects the configuration to be set from outside, typically from the
    Hydra-decorated main function.
    """

    _instance = None
    _cfg = None

    def __new__(cls):
        """Create a singleton instance."""
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize the configuration manager."""
        # Only initialize once
        if ConfigManager._cfg is None:
            ConfigManager._cfg = {}

    def set_config(self, cfg: Any):
        """Set the configuration.

        Args:
            cfg: Configuration object (DictConfig or dict)
        """
        if OmegaConf.is_config(cfg):
            ConfigManager._cfg = OmegaConf.to_container(cfg, resolve=True)
        else:
            ConfigManager._cfg = dict(cfg or {})

        logger.info("Configuration set successfully")

    def get_config(self) -> Dict[str, Any]:
        """Get the configuration.

        Returns:
            Configuration dictionary
        """
        return ConfigManager._cfg

    def reset(self) -> None:
        """Drop the current configuration."""
        ConfigManager._cfg = {}


# Helper functions for accessing configuration values

def _build(model: type, section: str, values: Dict[str, Any]):
    # YAML has no infinity literal, null means unbounded
    values = {k: v for k, v in values.items() if v is not None}
    try:
        return model(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid '{section}' configuration: {e}") from e


def get_window_config() -> WindowConfig:
    """Get the window configuration.

    Returns:
        WindowConfig built from the ``window`` section
    """
    config = _get_config()
    return _build(WindowConfig, "window", config.get("window", {}) or {})


def get_fetcher_config() -> FetcherConfig:
    """Get the HTTP fetcher configuration.

    Returns:
        FetcherConfig built from the ``fetcher`` section
    """
    config = _get_config()
    return _build(FetcherConfig, "fetcher", config.get("fetcher", {}) or {})


# Create a singleton instance of the configuration manager
config_manager = ConfigManager()
