"""
--------------------------------------------------------------------------------
<pqtools project>
src/pqtools/src/output.py

Padded plain-text table writer.

Every cell is written as " <value> ", padded to its column width except in the
last column. Every line, including the last, ends with a newline:

     a    bb 
     111  2 

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, TextIO

from rich.cells import cell_len

from .errors import OutputWriteError


def _pad(cell: str, width: int) -> str:
    return cell + " " * (width - cell_len(cell))


class TableOutputWriter:
    def __init__(self, headers: Sequence[str], rows: Iterable[Sequence[str]]):
        self.headers = list(headers)
        self._rows = rows

    def _collect(self) -> List[Sequence[str]]:
        arity = len(self.headers)
        collected = []
        for i, row in enumerate(self._rows):
            if len(row) != arity:
                raise ValueError(
                    f"Row {i} has {len(row)} cell(s); expected {arity} to match headers"
                )
            collected.append(row)
        return collected

    def render_lines(self) -> List[str]:
        rows = self._collect()
        widths = [cell_len(h) for h in self.headers]
        for row in rows:
            for j, cell in enumerate(row):
                widths[j] = max(widths[j], cell_len(cell))
        if widths:
            widths[-1] = 0  # last column is not padded
        lines = []
        for row in [self.headers, *rows]:
            lines.append("".join(f" {_pad(c, w)} " for c, w in zip(row, widths)) + "\n")
        return lines

    def write(self, out: TextIO) -> int:
        """Write the table to ``out``; returns the number of data rows written."""
        lines = self.render_lines()
        try:
            for line in lines:
                out.write(line)
            out.flush()
        except (OSError, UnicodeError) as e:
            raise OutputWriteError(f"Failed to write output: {e}") from e
        return len(lines) - 1
