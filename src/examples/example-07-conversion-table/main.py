"""
Example 07: From Iterator to Parquet

A bounded slice of the infinite sequence is batched into DataFrames
and streamed into a Parquet file, one row group per batch.
"""

import tempfile
from pathlib import Path

import pandas as pd

from fahr_to_celc.table import ConversionTable
from fahr_to_celc.writers import ParquetWriter


if __name__ == "__main__":
    table = ConversionTable(start=-40.0, step=10.0, num_rows=26, batch_size=10)

    print("Conversion table:")
    for line in table.format_lines():
        print(f"  {line}")

    with tempfile.TemporaryDirectory() as tmpdir:
        output_path = Path(tmpdir) / "conversion_table.parquet"

        with ParquetWriter(output_path) as writer:
            stats = writer.write(table.dataframes())

        print(f"\nWrote {stats.total_rows} rows in {stats.total_batches} batches "
              f"({stats.file_size_bytes:,} bytes)")

        df = pd.read_parquet(output_path)
        print("\nRead back from Parquet:")
        print(df.head())

    print("\n✅ Only one batch is ever held in memory while writing!")
