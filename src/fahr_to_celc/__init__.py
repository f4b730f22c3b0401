"""Fahr to Celc - Lazy Fahrenheit to Celsius sequences and conversion tables."""

__version__ = "0.1.0"

from .exceptions import EmptyInputError
from .models import ConversionRow, WriteStatistics
from .sequence import FahrToCelc, fahrenheit_to_celsius
from .stats import min_max
from .table import ConversionTable, DataFrameTransformer, PairBatcher, take
from .writers import CSVWriter, ParquetWriter, create_writer

__all__ = [
    # Sequence
    "FahrToCelc",
    "fahrenheit_to_celsius",
    # Stats
    "min_max",
    "EmptyInputError",
    # Models
    "ConversionRow",
    "WriteStatistics",
    # Table
    "ConversionTable",
    "DataFrameTransformer",
    "PairBatcher",
    "take",
    # Writers
    "ParquetWriter",
    "CSVWriter",
    "create_writer",
]
