"""Typer CLI application for brand-monitor."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from brand_monitor import __version__
from brand_monitor.cli import classify, rank, resolve

app = typer.Typer(
    help="brand-monitor: competitor resolution and AI visibility ranking.",
    no_args_is_help=True,
)

rank.register(app)
resolve.register(app)
classify.register(app)


def _version_callback(value: bool) -> None:
    if value:
        print(f"brand-monitor {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log resolver and ranking decisions"
    ),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Competitor resolution and AI visibility ranking."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
