"""Tests for configuration handling."""

import math

import pytest
from omegaconf import OmegaConf

from pagebuffer_core.models import WindowConfig
from pagebuffer_core.utils.config import (
    ConfigManager,
    config_manager,
    get_fetcher_config,
    get_window_config,
)
from pagebuffer_core.utils.error_handling import ConfigurationError


@pytest.fixture(autouse=True)
def clean_config():
    config_manager.reset()
    yield
    config_manager.reset()


def test_config_manager_is_singleton():
    assert ConfigManager() is config_manager


def test_window_defaults():
    config = WindowConfig()
    assert config.buffer == 1
    assert config.min == 0
    assert math.isinf(config.max)


def test_window_config_assignment_is_not_validated():
    config = WindowConfig()
    config.buffer = -5
    assert config.buffer == -5


def test_window_config_from_dictconfig():
    cfg = OmegaConf.create({"window": {"buffer": 3, "min": 0, "max": None}})
    config_manager.set_config(cfg)

    window = get_window_config()
    assert window.buffer == 3
    assert math.isinf(window.max)


def test_window_config_from_dict():
    config_manager.set_config({"window": {"buffer": 2, "max": 100}})
    window = get_window_config()
    assert (window.buffer, window.min, window.max) == (2, 0, 100)


def test_invalid_window_config():
    config_manager.set_config({"window": {"buffer": -1}})
    with pytest.raises(ConfigurationError):
        get_window_config()


def test_fetcher_config_defaults_and_overrides():
    assert get_fetcher_config().limit == 10

    config_manager.set_config({"fetcher": {"base_url": "http://example.com/items", "limit": 25}})
    fetcher = get_fetcher_config()
    assert fetcher.base_url == "http://example.com/items"
    assert fetcher.limit == 25
