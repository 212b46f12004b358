"""
--------------------------------------------------------------------------------
<pqtools project>
src/pqtools/cli.py

Public pqtools CLI entrypoint facade.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from .src.app import app, main

__all__ = ["app", "main"]
