"""Bounded conversion tables built on top of the lazy sequence."""

import logging
from itertools import islice
from typing import Iterable, Iterator, List, Optional, Tuple, TypeVar

import pandas as pd

from .models import ConversionRow
from .sequence import FahrToCelc

logger = logging.getLogger(__name__)

T = TypeVar("T")

Pair = Tuple[float, float]

COLUMNS = ["fahrenheit", "celsius"]


def take(iterable: Iterable[T], n: int) -> List[T]:
    """Return the first ``n`` items of ``iterable`` as a list."""
    if n < 0:
        raise ValueError("n must not be negative")
    return list(islice(iterable, n))


class PairBatcher:
    """
    Batches pairs into groups for DataFrame creation.

    Single Responsibility: Group pairs into batches.
    """

    def __init__(self, batch_size: int = 1000):
        """
        Initialize batcher.

        Args:
            batch_size: Number of pairs per batch
        """
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")
        self.batch_size = batch_size

    def batch(self, pairs: Iterator[Pair]) -> Iterator[List[Pair]]:
        """
        Batch pairs into groups.

        Args:
            pairs: Iterator of (fahrenheit, celsius) pairs

        Yields:
            Lists of pairs (batches)
        """
        batch: List[Pair] = []
        for pair in pairs:
            batch.append(pair)
            if len(batch) >= self.batch_size:
                yield batch
                batch = []

        # Yield remaining pairs
        if batch:
            yield batch


class DataFrameTransformer:
    """
    Transforms pair batches into pandas DataFrames.

    Single Responsibility: Convert pair batches to typed DataFrames.
    """

    def __init__(self, precision: Optional[int] = None):
        """
        Initialize transformer.

        Args:
            precision: Decimal places to round Celsius values to (None keeps full precision)
        """
        self.precision = precision

    def transform(self, batches: Iterator[List[Pair]]) -> Iterator[pd.DataFrame]:
        """
        Transform batches to DataFrames.

        Args:
            batches: Iterator of pair batches

        Yields:
            DataFrames with fahrenheit, celsius and batch_number columns
        """
        for batch_num, batch in enumerate(batches, 1):
            row_dicts = [ConversionRow(fahr, celc).to_dict() for fahr, celc in batch]
            df = pd.DataFrame(row_dicts, columns=COLUMNS).astype("float64")

            if self.precision is not None:
                df["celsius"] = df["celsius"].round(self.precision)

            df["batch_number"] = batch_num

            logger.debug(f"Created DataFrame batch {batch_num} with {len(df)} rows")
            yield df


class ConversionTable:
    """A bounded prefix of a FahrToCelc sequence."""

    def __init__(
        self,
        start: float,
        step: float,
        num_rows: int,
        batch_size: int = 1000,
        precision: Optional[int] = 2,
    ):
        if num_rows < 0:
            raise ValueError("num_rows must not be negative")
        self.start = start
        self.step = step
        self.num_rows = num_rows
        self.precision = precision
        self.batcher = PairBatcher(batch_size)
        self.transformer = DataFrameTransformer(precision)

    def pairs(self) -> Iterator[Pair]:
        """Yield raw pairs from a fresh sequence."""
        return islice(FahrToCelc(self.start, self.step), self.num_rows)

    def rows(self) -> Iterator[ConversionRow]:
        for fahr, celc in self.pairs():
            yield ConversionRow(fahrenheit=fahr, celsius=celc)

    def dataframes(self) -> Iterator[pd.DataFrame]:
        """Lazily yield one DataFrame per batch."""
        logger.info(
            f"Building conversion table: {self.num_rows:,} rows from "
            f"{self.start} F in steps of {self.step} F"
        )
        return self.transformer.transform(self.batcher.batch(self.pairs()))

    def to_dataframe(self) -> pd.DataFrame:
        """Materialize the whole table as a single DataFrame."""
        frames = [df.drop(columns="batch_number") for df in self.dataframes()]
        if not frames:
            return pd.DataFrame(columns=COLUMNS, dtype="float64")
        return pd.concat(frames, ignore_index=True)

    def format_lines(self) -> Iterator[str]:
        """Yield one console line per row."""
        digits = 2 if self.precision is None else self.precision
        for row in self.rows():
            yield f"F = {row.fahrenheit:8.{digits}f}; C = {row.celsius:8.{digits}f}"
