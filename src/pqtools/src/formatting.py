"""
--------------------------------------------------------------------------------
<pqtools project>
src/pqtools/src/formatting.py

Display formatting for Parquet values.

Cells are rendered column-wise from Arrow arrays so that type information
(float width, timestamp unit) drives the text:

    null                → null
    bool                → true | false
    float32 / float16   → shortest single-precision repr (3.3)
    string              → "quoted"
    binary              → [1, 2, 3]
    timestamp           → local time, YYYY-MM-DD HH:MM:SS ±HH:MM
    list / struct / map → [a, b] / {name: v} / {k -> v}

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import datetime as dt
from typing import Any, List

import numpy as np
import pyarrow as pa

NULL_TOKEN: str = "null"

_UNITS_PER_SECOND = {"s": 1, "ms": 1_000, "us": 1_000_000, "ns": 1_000_000_000}


def format_local_time(moment: dt.datetime) -> str:
    """Render an aware datetime in the local zone with a colon in the offset."""
    local = moment.astimezone()
    off = local.strftime("%z")
    if len(off) >= 5:
        off = f"{off[:3]}:{off[3:5]}"
    return f"{local.strftime('%Y-%m-%d %H:%M:%S')} {off}"


def format_epoch(value: int, unit: str) -> str:
    secs = value // _UNITS_PER_SECOND[unit]
    try:
        moment = dt.datetime.fromtimestamp(secs, tz=dt.timezone.utc)
        return format_local_time(moment)
    except (ValueError, OverflowError, OSError):
        # outside datetime's years 1..9999; numpy has no such limit (UTC)
        return str(np.datetime64(secs, "s")).replace("T", " ") + " +00:00"


def format_epoch_days(days: int) -> str:
    return str(np.datetime64(days, "D"))


def _fmt_float(value: float, dtype: pa.DataType) -> str:
    if pa.types.is_float32(dtype):
        return str(np.float32(value))
    if pa.types.is_float16(dtype):
        return str(np.float16(value))
    return repr(float(value))


def fmt_value(value: Any, dtype: pa.DataType) -> str:
    """Format a single Python value produced by ``Array.to_pylist()``."""
    if value is None:
        return NULL_TOKEN
    if pa.types.is_dictionary(dtype):
        return fmt_value(value, dtype.value_type)
    if pa.types.is_boolean(dtype):
        return "true" if value else "false"
    if pa.types.is_integer(dtype):
        return str(int(value))
    if pa.types.is_floating(dtype):
        return _fmt_float(value, dtype)
    if pa.types.is_string(dtype) or pa.types.is_large_string(dtype):
        return f'"{value}"'
    if (
        pa.types.is_binary(dtype)
        or pa.types.is_large_binary(dtype)
        or pa.types.is_fixed_size_binary(dtype)
    ):
        return "[" + ", ".join(str(b) for b in bytes(value)) + "]"
    if pa.types.is_timestamp(dtype):
        if value.tzinfo is None:
            value = value.replace(tzinfo=dt.timezone.utc)
        return format_local_time(value.replace(microsecond=0))
    if pa.types.is_date(dtype) or pa.types.is_time(dtype):
        return value.isoformat()
    if pa.types.is_map(dtype):
        items = (
            f"{fmt_value(k, dtype.key_type)} -> {fmt_value(v, dtype.item_type)}"
            for k, v in value
        )
        return "{" + ", ".join(items) + "}"
    if (
        pa.types.is_list(dtype)
        or pa.types.is_large_list(dtype)
        or pa.types.is_fixed_size_list(dtype)
    ):
        return "[" + ", ".join(fmt_value(v, dtype.value_type) for v in value) + "]"
    if pa.types.is_struct(dtype):
        parts = []
        for i in range(dtype.num_fields):
            field = dtype.field(i)
            parts.append(f"{field.name}: {fmt_value(value.get(field.name), field.type)}")
        return "{" + ", ".join(parts) + "}"
    return str(value)


def format_column(array: pa.Array) -> List[str]:
    """Format every cell of one Arrow column."""
    dtype = array.type
    if pa.types.is_timestamp(dtype):
        # integer epochs avoid lossy nanosecond → datetime conversion
        epochs = array.cast(pa.int64()).to_pylist()
        return [NULL_TOKEN if v is None else format_epoch(v, dtype.unit) for v in epochs]
    if pa.types.is_date32(dtype) or pa.types.is_date64(dtype):
        # day counts sidestep datetime.date's year 9999 limit
        epochs = array.cast(pa.int32() if pa.types.is_date32(dtype) else pa.int64()).to_pylist()
        if pa.types.is_date64(dtype):
            epochs = [None if v is None else v // 86_400_000 for v in epochs]
        return [NULL_TOKEN if v is None else format_epoch_days(v) for v in epochs]
    return [fmt_value(v, dtype) for v in array.to_pylist()]
