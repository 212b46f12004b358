"""
--------------------------------------------------------------------------------
<pqtools project>
src/pqtools/src/commands/__init__.py

Command implementations behind the Typer surface in pqtools.src.app.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""
