"""Data models for conversion tables and write results."""

from dataclasses import dataclass
from typing import Dict


@dataclass
class ConversionRow:
    """A single Fahrenheit/Celsius pair."""

    fahrenheit: float
    celsius: float

    def to_dict(self) -> Dict[str, float]:
        """Convert row to dictionary."""
        return {"fahrenheit": self.fahrenheit, "celsius": self.celsius}


@dataclass
class WriteStatistics:
    """Statistics for write operations."""

    total_rows: int = 0
    total_batches: int = 0
    file_size_bytes: int = 0
    elapsed_time: float = 0.0
