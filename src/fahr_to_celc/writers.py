"""Writer classes for Parquet and CSV conversion tables."""

import logging
import time
from pathlib import Path
from typing import Iterator, Optional

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from .config import TableConfig
from .models import WriteStatistics
from .protocols import DataWriter, LoggerProtocol


class ParquetWriter:
    """
    Writes DataFrames to Parquet format, one row group per batch.

    Uses context manager pattern for resource management.
    """

    def __init__(
        self,
        output_path: Path,
        compression: str = "snappy",
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize Parquet writer.

        Args:
            output_path: Path to output Parquet file
            compression: Compression codec
            logger: Logger instance
        """
        self.output_path = Path(output_path)
        self.compression = compression
        self._logger = logger or logging.getLogger(__name__)
        self._writer: Optional[pq.ParquetWriter] = None
        self._schema: Optional[pa.Schema] = None
        self._total_rows = 0

    def __enter__(self):
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager and close writer."""
        self.close()

    def write(self, dataframes: Iterator[pd.DataFrame]) -> WriteStatistics:
        """
        Write dataframes to the Parquet file.

        Args:
            dataframes: Iterator of DataFrames to write

        Returns:
            WriteStatistics with operation details

        Raises:
            ValueError: If a batch schema differs from the first batch
        """
        start_time = time.time()
        batch_count = 0
        # Every call starts a new file
        self._total_rows = 0

        for df in dataframes:
            table = pa.Table.from_pandas(df, preserve_index=False)

            # Initialize writer on first batch
            if self._writer is None:
                self.output_path.parent.mkdir(parents=True, exist_ok=True)
                self._schema = table.schema
                self._writer = pq.ParquetWriter(
                    str(self.output_path),
                    self._schema,
                    compression=self.compression,
                )
            elif not table.schema.equals(self._schema):
                raise ValueError(
                    f"DataFrame schema mismatch. Expected {self._schema}, got {table.schema}"
                )

            self._writer.write_table(table)
            self._total_rows += len(df)
            batch_count += 1

            self._logger.debug(f"Written {len(df)} rows (total: {self._total_rows})")

        # Flush the footer so the file size is final
        self.close()

        elapsed_time = time.time() - start_time
        # No batches means no file was written by this call
        file_size = self.output_path.stat().st_size if batch_count else 0

        self._logger.info(
            f"Successfully wrote {self._total_rows} total rows to {self.output_path}"
        )

        return WriteStatistics(
            total_rows=self._total_rows,
            total_batches=batch_count,
            file_size_bytes=file_size,
            elapsed_time=elapsed_time,
        )

    def close(self):
        """Close the Parquet writer."""
        if self._writer:
            self._writer.close()
            self._writer = None


class CSVWriter:
    """
    Writes DataFrames to CSV format.

    Uses context manager pattern for resource management.
    """

    def __init__(
        self,
        output_path: Path,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize CSV writer.

        Args:
            output_path: Path to output CSV file
            logger: Logger instance
        """
        self.output_path = Path(output_path)
        self._logger = logger or logging.getLogger(__name__)
        self._file_handle = None
        self._header_written = False
        self._total_rows = 0

    def __enter__(self):
        """Enter context manager."""
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_handle = open(self.output_path, "w", newline="", encoding="utf-8")
        self._logger.info(f"Writing conversion table to CSV: {self.output_path}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager and close file."""
        self.close()

    def write(self, dataframes: Iterator[pd.DataFrame]) -> WriteStatistics:
        """
        Write dataframes to the CSV file.

        Args:
            dataframes: Iterator of DataFrames to write

        Returns:
            WriteStatistics with operation details

        Raises:
            RuntimeError: If called outside the context manager
        """
        if not self._file_handle:
            raise RuntimeError("CSVWriter must be used as context manager")

        start_time = time.time()
        batch_count = 0

        for df in dataframes:
            df.to_csv(self._file_handle, index=False, header=not self._header_written)
            self._header_written = True
            self._total_rows += len(df)
            batch_count += 1

        self._file_handle.flush()
        elapsed_time = time.time() - start_time
        file_size = self.output_path.stat().st_size

        self._logger.info(
            f"Successfully wrote {self._total_rows} total rows to CSV: {self.output_path}"
        )

        return WriteStatistics(
            total_rows=self._total_rows,
            total_batches=batch_count,
            file_size_bytes=file_size,
            elapsed_time=elapsed_time,
        )

    def close(self):
        """Close the CSV file."""
        if self._file_handle:
            self._file_handle.close()
            self._file_handle = None


def create_writer(config: TableConfig, logger: Optional[LoggerProtocol] = None) -> DataWriter:
    """Build the writer matching ``config.output_format``."""
    if config.output_format == "parquet":
        return ParquetWriter(config.output_path, compression=config.compression, logger=logger)
    if config.output_format == "csv":
        return CSVWriter(config.output_path, logger=logger)
    raise ValueError(
        f"Unknown writer type: {config.output_format}. Valid options: csv, parquet"
    )
