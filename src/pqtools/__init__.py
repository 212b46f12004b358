"""
--------------------------------------------------------------------------------
<pqtools project>
src/pqtools/__init__.py

Public entry point for the pqtools package.

This module re-exports the stable Python API:

    from pqtools import ParquetFile, sample_indexes, filter_rows, ...

The console script ("pqtools") is defined in pyproject.toml and wraps
`pqtools.cli:main`.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

# re-exported API
from .src.commands.sample import run as run_sample  # noqa: F401
from .src.config import ReaderSettings, SampleOptions  # noqa: F401
from .src.errors import (  # noqa: F401
    OpenError,
    OptionsError,
    OutputWriteError,
    PqToolsError,
    ProjectionError,
    ReadError,
)
from .src.output import TableOutputWriter  # noqa: F401
from .src.projection import AllFields, Named  # noqa: F401
from .src.reader import ParquetFile, ProjectedBatch  # noqa: F401
from .src.sampler import sample_indexes  # noqa: F401
from .src.stream import filter_batches, filter_rows  # noqa: F401

__version__ = "0.1.0"
