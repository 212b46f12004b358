"""
--------------------------------------------------------------------------------
<pqtools project>
src/pqtools/tests/test_formatting.py

Display formatting of Arrow values.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal

import numpy as np
import pyarrow as pa

from pqtools.src.formatting import fmt_value, format_column
from pqtools.tests.parquet_helpers import TS_A, time_to_str


def test_scalars() -> None:
    assert format_column(pa.array([1, None], type=pa.int32())) == ["1", "null"]
    assert format_column(pa.array([True, False])) == ["true", "false"]
    assert format_column(pa.array(["5"])) == ['"5"']
    assert format_column(pa.array([4.4], type=pa.float64())) == ["4.4"]


def test_float32_uses_single_precision_repr() -> None:
    assert format_column(pa.array([3.3, 33.3], type=pa.float32())) == ["3.3", "33.3"]


def test_binary_as_byte_list() -> None:
    assert format_column(pa.array([b"\x01\x02\xff"], type=pa.binary())) == ["[1, 2, 255]"]


def test_timestamp_in_local_zone() -> None:
    for unit, value in (
        ("s", TS_A // 1000),
        ("ms", TS_A),
        ("us", TS_A * 1000),
        ("ns", TS_A * 1_000_000),
    ):
        arr = pa.array([value], type=pa.timestamp(unit))
        assert format_column(arr) == [time_to_str(TS_A)]


def test_timestamp_with_zone_is_same_instant() -> None:
    arr = pa.array([TS_A], type=pa.timestamp("ms", tz="UTC"))
    assert format_column(arr) == [time_to_str(TS_A)]


def test_nested_values() -> None:
    lst = pa.array([[1, 2], []], type=pa.list_(pa.int64()))
    assert format_column(lst) == ["[1, 2]", "[]"]

    st = pa.array(
        [{"a": 1, "b": "x"}],
        type=pa.struct([("a", pa.int32()), ("b", pa.string())]),
    )
    assert format_column(st) == ['{a: 1, b: "x"}']

    mp = pa.array([[("k", 1.5)]], type=pa.map_(pa.string(), pa.float64()))
    assert format_column(mp) == ['{"k" -> 1.5}']


def test_dates_times_decimals() -> None:
    assert fmt_value(dt.date(2009, 4, 1), pa.date32()) == "2009-04-01"
    assert fmt_value(dt.time(12, 30), pa.time64("us")) == "12:30:00"
    assert fmt_value(Decimal("1.50"), pa.decimal128(5, 2)) == "1.50"


def test_dictionary_column() -> None:
    arr = pa.array(["x", "y", "x"]).dictionary_encode()
    assert format_column(arr) == ['"x"', '"y"', '"x"']


def test_timestamp_past_year_9999_falls_back_to_utc() -> None:
    arr = pa.array([300_000_000_000_000, None], type=pa.timestamp("ms"))
    expected = str(np.datetime64(300_000_000_000, "s")).replace("T", " ") + " +00:00"
    assert format_column(arr) == [expected, "null"]


def test_dates_past_year_9999() -> None:
    assert format_column(pa.array([3_000_000], type=pa.date32())) == [
        str(np.datetime64(3_000_000, "D"))
    ]
    assert format_column(pa.array([14_335, None], type=pa.date32())) == ["2009-04-01", "null"]
    assert format_column(pa.array([14_335 * 86_400_000], type=pa.date64())) == ["2009-04-01"]
