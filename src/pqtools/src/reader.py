"""
--------------------------------------------------------------------------------
<pqtools project>
src/pqtools/src/reader.py

Thin facade over pyarrow.parquet.ParquetFile: schema names, row count and a
projected, display-formatted row iterator decoded one record batch at a time.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple

import pyarrow as pa
import pyarrow.parquet as pq

from .config import ReaderSettings
from .errors import OpenError, ProjectionError, ReadError
from .formatting import format_column
from .projection import AllFields, ColumnProjection, Named

Row = Tuple[str, ...]

log = logging.getLogger("pqtools.reader")


class ParquetFile:
    def __init__(self, path: Path, handle: pq.ParquetFile, settings: ReaderSettings):
        self.path = path
        self._pf = handle
        self._settings = settings
        self._closed = False

    @classmethod
    def of(cls, path: Path, settings: Optional[ReaderSettings] = None) -> "ParquetFile":
        path = Path(path)
        try:
            handle = pq.ParquetFile(str(path))
        except (OSError, pa.ArrowException) as e:
            raise OpenError(f"Cannot open parquet file {path}: {e}") from e
        log.debug("opened %s (%d row group(s))", path, handle.metadata.num_row_groups)
        return cls(path, handle, settings or ReaderSettings())

    # ---- lifecycle ----

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._pf.close()

    def __enter__(self) -> "ParquetFile":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # ---- metadata ----

    def metadata(self) -> Optional[pq.FileMetaData]:
        """File metadata, or None when the file holds no row groups."""
        md = self._pf.metadata
        if md is None or md.num_row_groups == 0:
            return None
        return md

    def num_rows(self) -> int:
        return int(self._pf.metadata.num_rows)

    def schema_field_names(self) -> List[str]:
        return list(self._pf.schema_arrow.names)

    # ---- rows ----

    def _resolve(self, projection: ColumnProjection) -> Tuple[str, ...]:
        available = self.schema_field_names()
        if not isinstance(projection, Named):
            return tuple(available)
        known = set(available)
        missing = [n for n in projection.names if n not in known]
        if missing:
            raise ProjectionError(missing, available)
        return projection.names

    def batch_iter(self, projection: ColumnProjection = AllFields()) -> Iterator["ProjectedBatch"]:
        """
        Return a single-pass iterator of undecoded record batches in scan order.

        Unknown column names raise ProjectionError here, before any batch is
        read.
        """
        return self._batches(self._resolve(projection))

    def row_iter(self, projection: ColumnProjection = AllFields()) -> Iterator[Row]:
        """
        Return a single-pass iterator of formatted rows.

        Unknown column names raise ProjectionError here, before any row is
        decoded.
        """
        batches = self.batch_iter(projection)
        return (row for b in batches for row in b.rows())

    def _batches(self, names: Tuple[str, ...]) -> Iterator["ProjectedBatch"]:
        size = self._settings.batch_size
        if not names:
            total = self.num_rows()
            for offset in range(0, total, size):
                yield ProjectedBatch(self.path, names, offset, min(size, total - offset))
            return
        batches = self._pf.iter_batches(batch_size=size, columns=list(dict.fromkeys(names)))
        offset = 0
        while True:
            try:
                batch = next(batches)
            except StopIteration:
                return
            except (OSError, pa.ArrowException) as e:
                raise ReadError(f"Failed to decode {self.path}: {e}") from e
            yield ProjectedBatch(self.path, names, offset, batch.num_rows, batch)
            offset += batch.num_rows


class ProjectedBatch:
    """Rows [offset, offset + num_rows) of a file, formatted only on demand."""

    def __init__(
        self,
        path: Path,
        names: Tuple[str, ...],
        offset: int,
        num_rows: int,
        batch: Optional[pa.RecordBatch] = None,
    ):
        self.path = path
        self.names = names
        self.offset = offset
        self.num_rows = num_rows
        self._batch = batch

    def rows(self, positions: Optional[Sequence[int]] = None) -> Iterator[Row]:
        """Formatted rows, optionally only those at batch-relative ``positions``."""
        count = self.num_rows if positions is None else len(positions)
        if self._batch is None:
            for _ in range(count):
                yield ()
            return
        batch = self._batch
        if positions is not None:
            batch = batch.take(pa.array(positions, type=pa.int64()))
        try:
            cols = {
                name: format_column(batch.column(i))
                for i, name in enumerate(batch.schema.names)
            }
        except (ValueError, OverflowError, pa.ArrowException) as e:
            raise ReadError(f"Failed to format values from {self.path}: {e}") from e
        yield from zip(*(cols[n] for n in self.names))
