"""
--------------------------------------------------------------------------------
<pqtools project>
src/pqtools/src/stream.py

Keep only the rows whose scan ordinal was sampled.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from bisect import bisect_left
from typing import AbstractSet, Iterable, Iterator, TypeVar

T = TypeVar("T")


def filter_rows(rows: Iterable[T], indexes: AbstractSet[int]) -> Iterator[T]:
    remaining = len(indexes)
    if remaining == 0:
        return
    for ordinal, row in enumerate(rows):
        if ordinal in indexes:
            yield row
            remaining -= 1
            # every sampled ordinal emitted; stop pulling upstream
            if remaining == 0:
                return


def filter_batches(batches: Iterable, indexes: AbstractSet[int]) -> Iterator:
    """
    Same contract as ``filter_rows`` over contiguous batches in scan order.

    Each batch needs ``offset``, ``num_rows`` and ``rows(positions)``; only the
    sampled positions of a batch are handed to ``rows``.
    """
    ordered = sorted(indexes)
    if not ordered:
        return
    pos = 0
    for batch in batches:
        end = batch.offset + batch.num_rows
        stop = bisect_left(ordered, end, pos)
        if stop > pos:
            yield from batch.rows([o - batch.offset for o in ordered[pos:stop]])
            pos = stop
        # every sampled ordinal emitted; stop pulling upstream
        if pos == len(ordered):
            return
