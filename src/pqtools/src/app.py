"""
--------------------------------------------------------------------------------
<pqtools project>
src/pqtools/src/app.py

Typer-based CLI surface for pqtools. Commands validate their arguments here
and delegate to implementations under pqtools.src.commands.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import sys
from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer

from .args import ShortEqualsGroup
from .commands import sample as sample_cmd
from .config import DEFAULT_SAMPLE, SampleOptions
from .error_output import print_user_error
from .errors import PqToolsError
from .logging_setup import configure_logging

app = typer.Typer(
    cls=ShortEqualsGroup,
    add_completion=False,
    no_args_is_help=True,
    help=(
        "pqtools: inspect Parquet files from the command line.\n\n"
        "\b\nCommands:\n"
        "  • pqtools sample - print a uniform random sample of rows as a table"
    ),
)


class OutputFormat(str, Enum):
    table = "table"


@app.callback()
def _root(verbose: int = typer.Option(0, "--verbose", "-v", count=True)):
    """
    Global flags: -v for more logs (repeatable).
    """
    configure_logging(verbose)


@app.command("sample", help="Randomly sample rows from parquet.")
def sample(
    path: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Path to parquet",
    ),
    columns: Optional[List[str]] = typer.Option(
        None,
        "--columns",
        "-c",
        help="Select columns from parquet (repeatable; order is kept)",
    ),
    sample: int = typer.Option(
        DEFAULT_SAMPLE, "--sample", "-s", min=0, help="Sample size limit"
    ),
    fmt: OutputFormat = typer.Option(
        OutputFormat.table, "--format", "-f", help="Output format"
    ),
):
    try:
        options = SampleOptions.build(
            path=path,
            columns=list(columns) if columns else None,
            sample=sample,
            format=fmt.value,
        )
        sample_cmd.run(options, out=sys.stdout)
    except PqToolsError as e:
        print_user_error(e)
        raise typer.Exit(code=1)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Aborted by user (Ctrl-C).", err=True)
        raise SystemExit(130)
