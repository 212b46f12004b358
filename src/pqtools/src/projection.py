"""
--------------------------------------------------------------------------------
<pqtools project>
src/pqtools/src/projection.py

Column projection variants: every schema field, or an ordered list of names.

An empty ``Named`` projection is a legitimate (if odd) request for zero
columns and is distinct from ``AllFields``.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union


@dataclass(frozen=True)
class AllFields:
    """Project every top-level schema field, in schema order."""


@dataclass(frozen=True)
class Named:
    names: Tuple[str, ...]

    def __init__(self, names: Iterable[str]):
        object.__setattr__(self, "names", tuple(names))


ColumnProjection = Union[AllFields, Named]


def projection_of(columns: Optional[Iterable[str]]) -> ColumnProjection:
    if columns is None:
        return AllFields()
    return Named(columns)
