"""Rich console rendering for visibility reports and resolver results."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from brand_monitor.core.models import (
    ResolvedCompetitor,
    Standing,
    VisibilityReport,
)

_STANDING_STYLES: dict[Standing, str] = {
    Standing.ahead: "green",
    Standing.behind: "red",
    Standing.equal: "dim",
}


def _bar(width: float, cells: int = 20) -> str:
    filled = round(cells * width / 100)
    return "█" * filled + "░" * (cells - filled)


def render_visibility_report(report: VisibilityReport, console: Console) -> None:
    """Print the brand headline and the competitor breakdown table."""
    summary = report.summary
    style = _STANDING_STYLES[summary.standing]

    headline = Text()
    headline.append(f"{report.brand or summary.brand_name}", style="bold")
    headline.append(f"  ({report.service_type})  ", style="dim")
    headline.append(f"{summary.brand_score:g}%  ", style="bold cyan")
    headline.append(summary.badge, style=style)
    console.print(headline)
    console.print(f"[bold]Market rank:[/bold] #{summary.rank} of {summary.total_entities}")

    table = Table(title="Competitor Breakdown")
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Visibility", justify="right")
    table.add_column("Share")
    table.add_column("Domain")

    for entry in report.entries:
        name = Text(entry.name)
        if entry.is_own:
            name.append(" YOU", style="bold blue")
        table.add_row(
            str(entry.position),
            name,
            f"{entry.visibility_score:g}%",
            Text(_bar(entry.bar_width), style=entry.color),
            entry.domain or "-",
        )
    console.print(table)

    if report.errors:
        console.print("\n[bold yellow]Warnings:[/bold yellow]")
        for err in report.errors:
            console.print(f"  • {err}")


def render_resolved(competitors: list[ResolvedCompetitor], console: Console) -> None:
    """Print canonical keys and domains for resolved competitor names."""
    table = Table(title="Competitor Resolution")
    table.add_column("Name", style="bold")
    table.add_column("Canonical")
    table.add_column("Domain")
    table.add_column("Source")

    for c in competitors:
        name = Text(c.name, style=c.color or "")
        if c.url:
            domain, source = c.url, Text("supplied", style="green")
        elif c.suggestion:
            domain = c.suggestion.domain
            source = Text(
                c.suggestion.source.value,
                style="yellow" if c.suggestion.is_guess else "green",
            )
        else:
            domain, source = "-", Text("none", style="dim")
        table.add_row(name, c.key, domain, source)

    console.print(table)
