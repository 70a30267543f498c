"""Tests for the window calculator and the position index."""

import pytest

from pagebuffer_core.buffer import PositionIndex, WindowCalculator
from pagebuffer_core.models import WindowConfig


def test_neighbors_interleaved_by_radius():
    window = WindowCalculator(WindowConfig(buffer=2))
    assert window.neighbors(10) == [9, 11, 8, 12]


def test_neighbors_length_follows_buffer():
    config = WindowConfig(buffer=2)
    window = WindowCalculator(config)
    assert len(window.neighbors(10)) == 4

    config.buffer = 3
    assert len(window.neighbors(20)) == 6


def test_neighbors_clamped_to_max():
    window = WindowCalculator(WindowConfig(buffer=4, max=100))
    assert sorted(window.neighbors(98)) == [94, 95, 96, 97, 99, 100]


def test_neighbors_clamped_to_min():
    window = WindowCalculator(WindowConfig(buffer=3))
    assert sorted(window.neighbors(1)) == [0, 2, 3, 4]


def test_neighbors_with_zero_buffer():
    window = WindowCalculator(WindowConfig(buffer=0))
    assert window.neighbors(5) == []
    assert window.window(5) == (5,)


def test_neighbors_without_position():
    window = WindowCalculator(WindowConfig())
    assert window.neighbors(None) == []
    assert window.is_neighbor(0, None) is False


@pytest.mark.parametrize("candidate, expected", [
    (97, False),
    (98, True),
    (99, True),
    (100, True),
    (101, False),
])
def test_is_neighbor(candidate, expected):
    window = WindowCalculator(WindowConfig(buffer=1, max=100))
    assert window.is_neighbor(candidate, 99) is expected


def test_is_neighbor_respects_bounds():
    window = WindowCalculator(WindowConfig(buffer=2, min=5, max=10))
    assert window.is_neighbor(4, 5) is False
    assert window.is_neighbor(5, 5) is True
    assert window.is_neighbor(11, 10) is False


def test_window_includes_focus():
    window = WindowCalculator(WindowConfig(buffer=3, max=100))
    assert window.window(10) == (7, 8, 9, 10, 11, 12, 13)
    assert window.window(1) == (0, 1, 2, 3, 4)
    assert window.window(100) == (97, 98, 99, 100)


def test_position_index_register_and_pop():
    index = PositionIndex()
    index.register(3, ["a", "b"])
    index.register(1, ["c"])

    assert 3 in index
    assert "3" not in index
    assert index.positions() == [3, 1]
    assert index.get(3) == ["a", "b"]
    assert index.pop(3) == ["a", "b"]
    assert index.pop(3) is None
    assert len(index) == 1


def test_position_index_get_returns_copy():
    index = PositionIndex()
    index.register(0, ["a"])
    index.get(0).append("b")
    assert index.get(0) == ["a"]
