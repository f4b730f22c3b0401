"""Lazy Fahrenheit to Celsius sequence."""

from typing import Iterator, Tuple


def fahrenheit_to_celsius(fahr: float) -> float:
    """Convert a Fahrenheit reading to Celsius."""
    return (fahr - 32.0) / 1.8


class FahrToCelc:
    """
    Unbounded sequence of (fahrenheit, celsius) pairs.

    Starts at ``fahr`` and advances by ``step`` after every production.
    The sequence never ends on its own; bound it with ``itertools.islice``
    or ``table.take``.
    """

    def __init__(self, fahr: float, step: float):
        """
        Initialize the sequence.

        Args:
            fahr: First Fahrenheit value to emit
            step: Increment applied after each emission (may be zero or negative)
        """
        self._fahr = fahr
        self._step = step

    @property
    def current(self) -> float:
        """Next Fahrenheit value to be emitted."""
        return self._fahr

    @property
    def step(self) -> float:
        return self._step

    def produce_next(self) -> Tuple[float, float]:
        """
        Produce the next pair and advance the state.

        Returns:
            Tuple of (fahrenheit, celsius)
        """
        curr_fahr = self._fahr
        curr_celc = fahrenheit_to_celsius(curr_fahr)
        self._fahr = curr_fahr + self._step
        return curr_fahr, curr_celc

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        return self

    def __next__(self) -> Tuple[float, float]:
        return self.produce_next()

    def __repr__(self) -> str:
        return f"FahrToCelc(fahr={self._fahr!r}, step={self._step!r})"
