"""
--------------------------------------------------------------------------------
<pqtools project>
src/pqtools/__main__.py

Entrypoint for `python -m pqtools`.

It forwards to the Typer CLI defined in `pqtools.src.app:main`.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from .src.app import main

if __name__ == "__main__":
    main()
