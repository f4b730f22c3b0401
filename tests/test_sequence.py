"""Tests for sequence module."""

import math
from itertools import islice

import pytest

from fahr_to_celc.sequence import FahrToCelc, fahrenheit_to_celsius


def test_second_production():
    """Test that the second pair from 0 F in steps of 5 is (5, -15)."""
    seq = FahrToCelc(0.0, 5.0)

    seq.produce_next()
    fahr, celc = seq.produce_next()

    assert fahr == 5.0
    assert celc == pytest.approx(-15.0)


def test_first_five_productions():
    """Test the first five pairs against the known table."""
    pairs = list(islice(FahrToCelc(0.0, 5.0), 5))

    assert [fahr for fahr, _ in pairs] == [0.0, 5.0, 10.0, 15.0, 20.0]
    assert [round(celc, 2) for _, celc in pairs] == [-17.78, -15.0, -12.22, -9.44, -6.67]


def test_nth_value_is_initial_plus_n_steps():
    """Test that the n-th raw value equals initial + n * step."""
    initial, step = -40.0, 2.5
    seq = FahrToCelc(initial, step)

    for n in range(100):
        fahr, _ = seq.produce_next()
        assert fahr == pytest.approx(initial + n * step)


def test_celsius_matches_transform():
    """Test that every pair satisfies c == (v - 32) / 1.8."""
    for fahr, celc in islice(FahrToCelc(12.3, 7.7), 50):
        assert celc == (fahr - 32) / 1.8
        assert celc == fahrenheit_to_celsius(fahr)


def test_state_advances_by_step():
    """Test that current moves by exactly one step per production."""
    seq = FahrToCelc(32.0, 1.5)

    assert seq.current == 32.0
    assert seq.step == 1.5

    assert seq.produce_next() == (32.0, 0.0)
    assert seq.current == 33.5
    assert seq.step == 1.5


def test_same_arguments_give_same_sequence():
    """Test that two generators built alike produce identical sequences."""
    first = list(islice(FahrToCelc(98.6, 0.1), 20))
    second = list(islice(FahrToCelc(98.6, 0.1), 20))

    assert first == second


def test_zero_step_is_constant():
    """Test that a zero step repeats the initial value forever."""
    pairs = list(islice(FahrToCelc(212.0, 0.0), 10))

    assert pairs == [(212.0, 100.0)] * 10


def test_negative_step_descends():
    """Test that a negative step yields a descending sequence."""
    values = [fahr for fahr, _ in islice(FahrToCelc(100.0, -10.0), 6)]

    assert values == [100.0, 90.0, 80.0, 70.0, 60.0, 50.0]


def test_iterator_protocol():
    """Test that the sequence is its own iterator and next() never stops."""
    seq = FahrToCelc(0.0, 1.0)

    assert iter(seq) is seq
    assert next(seq) == (0.0, fahrenheit_to_celsius(0.0))
    for _ in range(1000):
        next(seq)
    assert seq.current == 1001.0


def test_non_finite_values_propagate():
    """Test that inf and nan flow through the transform unchanged."""
    fahr, celc = FahrToCelc(math.inf, 1.0).produce_next()
    assert fahr == math.inf
    assert celc == math.inf

    fahr, celc = FahrToCelc(math.nan, 1.0).produce_next()
    assert math.isnan(fahr)
    assert math.isnan(celc)


def test_repr():
    """Test repr shows current state."""
    assert repr(FahrToCelc(1.0, 2.0)) == "FahrToCelc(fahr=1.0, step=2.0)"
