"""
--------------------------------------------------------------------------------
<pqtools project>
src/pqtools/src/commands/sample.py

`sample` command: draw a uniform random sample of rows from a Parquet file and
write them as a padded text table.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging
from typing import List, Optional, TextIO

from ..config import ReaderSettings, SampleOptions
from ..output import TableOutputWriter
from ..projection import ColumnProjection, Named
from ..reader import ParquetFile
from ..sampler import sample_indexes
from ..stream import filter_batches

log = logging.getLogger("pqtools.sample")


def resolve_headers(pf: ParquetFile, projection: ColumnProjection) -> List[str]:
    if isinstance(projection, Named):
        return list(projection.names)
    return pf.schema_field_names()


def run(
    options: SampleOptions,
    out: TextIO,
    *,
    settings: Optional[ReaderSettings] = None,
) -> None:
    settings = settings or ReaderSettings.from_env()
    projection = options.projection

    with ParquetFile.of(options.path, settings) as pf:
        if pf.metadata() is None:
            log.info("%s has no row groups; nothing to sample", options.path)
            return

        headers = resolve_headers(pf, projection)
        total = pf.num_rows()
        indexes = sample_indexes(options.sample, total)
        log.info("sampling %d of %d row(s) from %s", len(indexes), total, options.path)

        rows = filter_batches(pf.batch_iter(projection), indexes)
        written = TableOutputWriter(headers, rows).write(out)
        log.debug("wrote %d row(s)", written)
