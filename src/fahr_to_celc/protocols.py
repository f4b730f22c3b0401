"""Protocol definitions for dependency inversion."""

from typing import Iterator, Protocol

import pandas as pd

from .models import WriteStatistics


class DataWriter(Protocol):
    """Protocol for table writers."""

    def write(self, dataframes: Iterator[pd.DataFrame]) -> WriteStatistics:
        """Write dataframes to output."""
        ...

    def close(self) -> None:
        """Release the output resource."""
        ...

    def __enter__(self) -> "DataWriter":
        ...

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        ...


class LoggerProtocol(Protocol):
    """Anything writers can report progress to, e.g. a logging.Logger."""

    def info(self, message: str) -> None:
        """Report an opened or finished output file."""
        ...

    def debug(self, message: str) -> None:
        """Report per-batch progress."""
        ...
