"""
CLI entry point using Typer.

Provides commands for barbell loading:
- plates: Plates to load per side for a target
- combos: Every plate load the denominations can make
- space: Every total reachable on a bar
- reachable: Every total reachable on any configured bar
- closest: Nearest reachable total to a target
- bar: Which bar to use for a target
"""

import logging
from typing import Annotated

import typer

from ..logging_config import setup_logging
from .app import app
from .commands import bars, loading  # noqa: F401  (registers commands)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging on stderr"),
    ] = False,
) -> None:
    """
    Barbell loading calculator.
    """
    setup_logging(logging.DEBUG if verbose else logging.WARNING)


if __name__ == "__main__":
    app()
