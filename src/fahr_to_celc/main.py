"""Main entry point for the Fahrenheit to Celsius table printer."""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from .config import TableConfig, get_table_config
from .models import WriteStatistics
from .stats import min_max
from .table import ConversionTable
from .writers import create_writer

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False)


def setup_logging(level: str = "INFO", verbose: bool = False):
    """Configure logging level.

    Args:
        level: Level name used when not verbose
        verbose: Enable verbose logging
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))


def print_summary(
    table: ConversionTable,
    celsius_range: tuple,
    write_stats: Optional[WriteStatistics],
    output_path: Optional[Path],
):
    """Print summary statistics.

    Args:
        table: Table that was printed
        celsius_range: (min, max) Celsius values of the table
        write_stats: Statistics from the file writer, None when nothing was written
        output_path: Path of the written file
    """
    print("\n" + "=" * 60)
    print("CONVERSION TABLE SUMMARY")
    print("=" * 60)

    print(f"  Rows: {table.num_rows:,}")
    print(f"  Start: {table.start} F, step: {table.step} F")
    print(f"  Celsius min = {celsius_range[0]:.2f}, max = {celsius_range[1]:.2f}")

    if write_stats is not None:
        print("\nOutput File:")
        print(f"  Path: {output_path}")
        print(f"  Rows written: {write_stats.total_rows:,}")
        print(f"  Batches: {write_stats.total_batches}")
        print(f"  File size: {write_stats.file_size_bytes:,} bytes")
        print(f"  Time taken: {write_stats.elapsed_time:.2f} seconds")

    print("=" * 60)


def run(config: TableConfig) -> int:
    """Print the table, optionally write it to disk, and return an exit code."""
    try:
        logger.info(f"Start: {config.start} F, step: {config.step} F, rows: {config.num_rows:,}")
        logger.info(f"Output format: {config.output_format}")

        table = ConversionTable(
            start=config.start,
            step=config.step,
            num_rows=config.num_rows,
            batch_size=config.batch_size,
            precision=config.precision,
        )

        for line in table.format_lines():
            print(line)

        celsius_range = min_max(row.celsius for row in table.rows())

        write_stats = None
        if config.writes_file:
            with create_writer(config) as writer:
                write_stats = writer.write(table.dataframes())

        print_summary(table, celsius_range, write_stats, config.output_path)
        return 0

    except KeyboardInterrupt:
        logger.warning("Execution interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"Error during execution: {e}", exc_info=True)
        return 1


@app.command()
def convert(
    start: Optional[float] = typer.Option(None, help="First Fahrenheit value (FAHR_START)"),
    step: Optional[float] = typer.Option(None, help="Fahrenheit increment per row (FAHR_STEP)"),
    rows: Optional[int] = typer.Option(None, help="Number of rows to print (NUM_ROWS)"),
    output_format: Optional[str] = typer.Option(None, "--format", help="none, csv or parquet (OUTPUT_FORMAT)"),
    output: Optional[Path] = typer.Option(None, help="Output file path (OUTPUT_PATH)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Print a Fahrenheit to Celsius conversion table."""
    try:
        config = get_table_config(
            start=start,
            step=step,
            num_rows=rows,
            output_format=output_format,
            output_path=output,
        )
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        raise typer.Exit(code=1)

    setup_logging(config.log_level, verbose)
    raise typer.Exit(code=run(config))


def main():
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
