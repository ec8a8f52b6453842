"""Resolve and check-url commands — name canonicalization and URL checks."""

from __future__ import annotations

import json

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from brand_monitor.core.config import load_config
from brand_monitor.core.errors import BrandMonitorError
from brand_monitor.core.models import IdentifiedCompetitor
from brand_monitor.core.pipeline import resolve_competitors
from brand_monitor.core.urls import (
    get_domain_from_url,
    normalize_report_url,
    validate_competitor_url,
    validate_url,
    with_scheme,
)
from brand_monitor.formatters.rich_output import render_resolved

console = Console()


def register(app: typer.Typer) -> None:
    """Register the resolve and check-url commands onto the Typer app."""

    @app.command()
    def resolve(
        names: list[str] = typer.Argument(help="Competitor names to resolve"),
        json_output: bool = typer.Option(False, "--json", help="Output result as JSON"),
        config_path: str = typer.Option(
            None, "--config", "-c", help="JSON config with lookup tables"
        ),
    ) -> None:
        """Canonicalize competitor names and suggest a domain for each."""
        try:
            config = load_config(config_path)
        except BrandMonitorError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise SystemExit(1)

        resolved = resolve_competitors(
            [IdentifiedCompetitor(name=n) for n in names], config
        )

        if json_output:
            print(json.dumps(
                [c.model_dump(mode="json", by_alias=True) for c in resolved], indent=2
            ))
            return

        render_resolved(resolved, console)

    @app.command("check-url")
    def check_url(
        urls: list[str] = typer.Argument(help="URLs to validate"),
        json_output: bool = typer.Option(False, "--json", help="Output result as JSON"),
    ) -> None:
        """Validate website URLs and show their display form."""
        rows = [
            {
                "url": url,
                "valid": validate_url(url),
                "display": validate_competitor_url(url),
                "domain": get_domain_from_url(url),
                "reportKey": normalize_report_url(with_scheme(url.strip())),
            }
            for url in urls
        ]

        if json_output:
            print(json.dumps(rows, indent=2))
        else:
            table = Table(title="URL Check")
            table.add_column("URL")
            table.add_column("Valid")
            table.add_column("Display")
            table.add_column("Report key")
            for row in rows:
                table.add_row(
                    row["url"],
                    "[green]yes[/green]" if row["valid"] else "[red]no[/red]",
                    row["display"] or "-",
                    row["reportKey"] or "-",
                )
            console.print(table)

        if not all(row["valid"] for row in rows):
            raise SystemExit(1)
