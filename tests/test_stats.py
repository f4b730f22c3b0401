"""Tests for stats module."""

import pytest

from fahr_to_celc.exceptions import EmptyInputError
from fahr_to_celc.stats import min_max


def test_min_max():
    """Test finding min and max of a list."""
    assert min_max([1, 4, 2, 4, 5]) == (1, 5)


def test_min_max_single_value():
    """Test that a single value is both min and max."""
    assert min_max([7]) == (7, 7)


def test_min_max_consumes_generator():
    """Test that min_max works on a one-shot iterator."""
    assert min_max(x * x for x in range(-3, 3)) == (0, 9)


def test_min_max_sorted_deduped():
    """Test min and max after sorting and removing duplicates."""
    data = sorted(set([1, 4, 2, 3, 3, 2, 5, 1]))

    assert data == [1, 2, 3, 4, 5]
    assert min_max(data) == (1, 5)


def test_min_max_empty_raises():
    """Test that empty input raises EmptyInputError instead of aborting."""
    with pytest.raises(EmptyInputError, match="Could not find min and max values"):
        min_max([])


def test_empty_input_error_is_value_error():
    """Test that EmptyInputError can be caught as ValueError."""
    with pytest.raises(ValueError):
        min_max(iter(()))
