"""Configuration management for the application."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

OUTPUT_FORMATS = ("none", "csv", "parquet")


@dataclass
class TableConfig:
    """Conversion table configuration parameters."""

    start: float = 0.0
    step: float = 5.0
    num_rows: int = 5
    batch_size: int = 1000
    output_format: str = "none"
    output_path: Optional[Path] = None
    compression: str = "snappy"
    precision: int = 2
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.num_rows <= 0:
            raise ValueError("num_rows must be positive")
        if self.batch_size <= 0:
            raise ValueError("batch_size must be positive")
        if self.precision < 0:
            raise ValueError("precision must not be negative")

        self.output_format = self.output_format.lower()
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format: {self.output_format}. "
                f"Valid options: {', '.join(OUTPUT_FORMATS)}"
            )

        if self.output_path is not None:
            self.output_path = Path(self.output_path)
        elif self.output_format != "none":
            self.output_path = Path(f"conversion_table.{self.output_format}")

    @property
    def writes_file(self) -> bool:
        return self.output_format != "none"

    @classmethod
    def from_env(cls, **overrides) -> "TableConfig":
        """Load table configuration from environment variables.

        Keyword arguments that are not None take precedence over the
        environment, so command-line options can sit on top of a .env file.
        """
        values = {
            "start": float(os.getenv("FAHR_START", "0.0")),
            "step": float(os.getenv("FAHR_STEP", "5.0")),
            "num_rows": int(os.getenv("NUM_ROWS", "5")),
            "batch_size": int(os.getenv("BATCH_SIZE", "1000")),
            "output_format": os.getenv("OUTPUT_FORMAT", "none"),  # none, csv, parquet
            "output_path": os.getenv("OUTPUT_PATH") or None,
            "compression": os.getenv("COMPRESSION", "snappy"),
            "precision": int(os.getenv("PRECISION", "2")),
            "log_level": os.getenv("LOG_LEVEL", "INFO"),
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)


def get_table_config(**overrides) -> TableConfig:
    """Get table configuration."""
    return TableConfig.from_env(**overrides)
