"""
Floor Validator and Direction Calculator tests
"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

import pytest
from dispatcher.core.floors import ALL_LEVELS, is_valid_level
from dispatcher.core.direction import UP, DOWN, IDLE, compute_direction


@pytest.mark.parametrize("level", [-2, -1, 1, 9, 18])
def test_valid_levels(level):
    assert is_valid_level(level)


@pytest.mark.parametrize("level", [-3, 0, 19, 100, -100])
def test_invalid_levels(level):
    assert not is_valid_level(level)


def test_every_listed_level_is_valid_and_nothing_else_in_range():
    for level in range(-10, 30):
        assert is_valid_level(level) == (level in ALL_LEVELS)
    assert len(ALL_LEVELS) == 20


@pytest.mark.parametrize("value", [None, "5", 5.5, 0.0, float("nan"), True, False, [5]])
def test_non_integer_values_are_invalid(value):
    assert not is_valid_level(value)


def test_empty_queue_is_idle():
    assert compute_direction(5, [], UP) == IDLE


def test_next_stop_above_is_up():
    assert compute_direction(5, [10, 2], IDLE) == UP


def test_next_stop_below_is_down():
    assert compute_direction(5, [2, 10], UP) == DOWN


@pytest.mark.parametrize("previous", [UP, DOWN, IDLE])
def test_sitting_on_next_stop_keeps_previous_direction(previous):
    assert compute_direction(7, [7, 12], previous) == previous


@pytest.mark.parametrize("value", [7.0, -2.0, 18.0])
def test_integral_floats_are_valid(value):
    # JSON numbers like 7.0 decode as float
    assert is_valid_level(value)
