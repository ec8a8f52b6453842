"""Rank command — visibility report for one analysis payload."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from brand_monitor.core.config import load_config
from brand_monitor.core.errors import BrandMonitorError
from brand_monitor.core.loader import load_analysis
from brand_monitor.core.models import OutputFormat
from brand_monitor.core.pipeline import build_visibility_report
from brand_monitor.formatters.csv import format_visibility_report_csv
from brand_monitor.formatters.rich_output import render_visibility_report

console = Console()


def register(app: typer.Typer) -> None:
    """Register the rank command onto the Typer app."""

    @app.command()
    def rank(
        file: str = typer.Argument(
            help="JSON file with company, competitors and identifiedCompetitors"
        ),
        json_output: bool = typer.Option(
            False, "--json", help="Output raw JSON instead of Rich table"
        ),
        format: OutputFormat = typer.Option(
            None, "--format", "-f", help="Output format: json, csv, or table"
        ),
        config_path: str = typer.Option(
            None, "--config", "-c", help="JSON config with lookup tables and colors"
        ),
    ) -> None:
        """Rank the tracked brand against its competitors."""
        if json_output:
            format = OutputFormat.json

        try:
            config = load_config(config_path)
            payload = load_analysis(file)
        except BrandMonitorError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise SystemExit(1)

        report = build_visibility_report(
            payload.company,
            payload.competitors,
            payload.identified_competitors,
            config,
        )

        if format == OutputFormat.json:
            print(report.model_dump_json(indent=2, by_alias=True))
            return
        if format == OutputFormat.csv:
            print(format_visibility_report_csv(report), end="")
            return

        render_visibility_report(report, console)
