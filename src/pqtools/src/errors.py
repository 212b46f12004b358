"""
--------------------------------------------------------------------------------
<pqtools project>
src/pqtools/src/errors.py

Narrow, typed exceptions used across pqtools. Callers can tell a rejected file
apart from a bad projection or a broken output stream without parsing messages.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Optional, Sequence


class PqToolsError(Exception):
    """Base class for pqtools errors surfaced to the CLI user."""

    def __init__(self, message: str, *, hint: Optional[str] = None):
        super().__init__(message)
        self.hint = hint


class OpenError(PqToolsError):
    """The Parquet library rejected the file, or it could not be read."""
    pass


class ProjectionError(PqToolsError):
    """One or more requested columns are not top-level schema fields."""

    def __init__(self, missing: Sequence[str], available: Sequence[str]):
        self.missing = list(missing)
        self.available = list(available)
        names = ", ".join(repr(m) for m in self.missing)
        super().__init__(
            f"Unknown column(s): {names}",
            hint="Available columns: " + (", ".join(self.available) or "(none)"),
        )


class OutputWriteError(PqToolsError):
    """The output stream rejected a write."""
    pass


class OptionsError(PqToolsError):
    """Sample options failed validation."""
    pass


class ReadError(PqToolsError):
    """Row data could not be decoded while streaming."""
    pass
