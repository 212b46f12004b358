"""
--------------------------------------------------------------------------------
<pqtools project>
src/pqtools/tests/parquet_helpers.py

Parquet writers and expected-value helpers shared by the test modules.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import datetime as dt
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

MESSAGE_SCHEMA = pa.schema(
    [
        ("field_int32", pa.int32()),
        ("field_int64", pa.int64()),
        ("field_float", pa.float32()),
        ("field_double", pa.float64()),
        ("field_string", pa.string()),
        ("field_boolean", pa.bool_()),
        ("field_timestamp", pa.timestamp("ms")),
    ]
)

TS_A = 1_238_544_000_000
TS_B = 1_238_544_060_000


def time_to_str(ms: int) -> str:
    local = dt.datetime.fromtimestamp(ms // 1000).astimezone()
    s = local.strftime("%Y-%m-%d %H:%M:%S %z")
    return f"{s[:-2]}:{s[-2:]}"


def write_messages(path: Path) -> Path:
    table = pa.table(
        {
            "field_int32": [1, 11],
            "field_int64": [2, 22],
            "field_float": [3.3, 33.3],
            "field_double": [4.4, 44.4],
            "field_string": ["5", "55"],
            "field_boolean": [True, False],
            "field_timestamp": [TS_A, TS_B],
        },
        schema=MESSAGE_SCHEMA,
    )
    pq.write_table(table, path)
    return path


def write_sequence(path: Path, n: int, *, row_group_size: int = 16) -> Path:
    """Single int64 column `n` holding 0..n-1, split over several row groups."""
    table = pa.table({"n": pa.array(range(n), type=pa.int64())})
    pq.write_table(table, path, row_group_size=row_group_size)
    return path


def write_table(path: Path, columns: dict) -> Path:
    pq.write_table(pa.table(columns), path)
    return path
