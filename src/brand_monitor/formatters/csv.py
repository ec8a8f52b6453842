"""CSV formatter for visibility reports."""

from __future__ import annotations

import csv
import io

from brand_monitor.core.models import VisibilityReport


def format_visibility_report_csv(report: VisibilityReport) -> str:
    """Format a VisibilityReport as CSV with one row per ranked entity."""
    output = io.StringIO()
    writer = csv.writer(output)

    writer.writerow(["position", "name", "visibility_score", "is_own",
                     "domain", "favicon", "color"])
    for entry in report.entries:
        writer.writerow([
            entry.position,
            entry.name,
            entry.visibility_score,
            entry.is_own,
            entry.domain or "",
            entry.favicon or "",
            entry.color,
        ])

    # Summary row
    summary = report.summary
    writer.writerow([])
    writer.writerow(["SUMMARY", "service_type", "rank", "brand_score",
                     "top_competitor", "difference", "standing"])
    writer.writerow([
        report.brand,
        report.service_type,
        summary.rank,
        summary.brand_score,
        summary.top_competitor.name if summary.top_competitor else "",
        summary.difference,
        summary.standing.label,
    ])

    return output.getvalue()
