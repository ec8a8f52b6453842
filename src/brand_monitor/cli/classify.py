"""Classify command — service-type label for a company record."""

from __future__ import annotations

import json

import typer
from rich.console import Console
from rich.markup import escape

from brand_monitor.core.classifier import detect_service_type
from brand_monitor.core.errors import BrandMonitorError
from brand_monitor.core.loader import load_company

console = Console()


def register(app: typer.Typer) -> None:
    """Register the classify command onto the Typer app."""

    @app.command()
    def classify(
        file: str = typer.Argument(help="JSON file with a company record"),
        json_output: bool = typer.Option(False, "--json", help="Output result as JSON"),
    ) -> None:
        """Detect the service type of a company."""
        try:
            company = load_company(file)
        except BrandMonitorError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise SystemExit(1)

        service_type = detect_service_type(company)
        if json_output:
            print(json.dumps({"name": company.name, "serviceType": service_type}))
            return
        console.print(f"[bold]{company.name or company.url}[/bold]: {service_type}")
