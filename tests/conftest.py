"""Shared fixtures."""

import pytest

ENV_VARS = (
    "FAHR_START",
    "FAHR_STEP",
    "NUM_ROWS",
    "BATCH_SIZE",
    "OUTPUT_FORMAT",
    "OUTPUT_PATH",
    "COMPRESSION",
    "PRECISION",
    "LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove configuration variables so defaults apply."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
