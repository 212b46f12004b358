"""
--------------------------------------------------------------------------------
<pqtools project>
src/pqtools/tests/conftest.py

Shared Parquet fixtures.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging
from pathlib import Path

import pyarrow.parquet as pq
import pytest

from pqtools.tests.parquet_helpers import MESSAGE_SCHEMA, write_messages, write_sequence


# fixtures
@pytest.fixture(autouse=True)
def _restore_root_logging():
    """The CLI callback rewires root handlers; put them back after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def messages_parquet(tmp_path: Path) -> Path:
    return write_messages(tmp_path / "msg.parquet")


@pytest.fixture
def sequence_parquet(tmp_path: Path) -> Path:
    return write_sequence(tmp_path / "seq.parquet", 100)


@pytest.fixture
def empty_parquet(tmp_path: Path) -> Path:
    """Zero rows written through write_table: one empty row group."""
    path = tmp_path / "empty.parquet"
    pq.write_table(MESSAGE_SCHEMA.empty_table(), path)
    return path


@pytest.fixture
def no_row_groups_parquet(tmp_path: Path) -> Path:
    """A writer closed without writing anything leaves no row groups."""
    path = tmp_path / "no_groups.parquet"
    writer = pq.ParquetWriter(path, MESSAGE_SCHEMA)
    writer.close()
    return path
