"""
--------------------------------------------------------------------------------
<pqtools project>
src/pqtools/src/args.py

Argument pre-processing for the Typer app.

Click reads `-c=name` as the value "=name". The group below rewrites such
tokens into `-c name` so both spellings are accepted.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import re
from typing import List, Sequence

from typer.core import TyperGroup

_SHORT_EQUALS = re.compile(r"^-([A-Za-z])=(.*)$", re.DOTALL)


def split_short_equals(argv: Sequence[str]) -> List[str]:
    out: List[str] = []
    passthrough = False
    for tok in argv:
        if passthrough:
            out.append(tok)
            continue
        if tok == "--":
            passthrough = True
            out.append(tok)
            continue
        m = _SHORT_EQUALS.match(tok)
        if m:
            out.extend([f"-{m.group(1)}", m.group(2)])
        else:
            out.append(tok)
    return out


class ShortEqualsGroup(TyperGroup):
    def parse_args(self, ctx, args):
        return super().parse_args(ctx, split_short_equals(args))
