"""
--------------------------------------------------------------------------------
<pqtools project>
src/pqtools/src/error_output.py

User-facing CLI error rendering.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from .errors import PqToolsError

err_console = Console(stderr=True)


def print_user_error(e: PqToolsError) -> None:
    err_console.print(
        f"[bold red]ERROR:[/bold red] {escape(str(e))}", soft_wrap=True, highlight=False
    )
    hint = getattr(e, "hint", None)
    if hint:
        err_console.print(f"Hint: {escape(hint)}", soft_wrap=True, highlight=False)
