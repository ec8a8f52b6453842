"""Assemble a visibility report from scraped, detected and scored records."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from brand_monitor.core.classifier import detect_service_type
from brand_monitor.core.config import ResolverConfig
from brand_monitor.core.models import (
    Company,
    CompetitorRanking,
    IdentifiedCompetitor,
    ResolvedCompetitor,
    VisibilityReport,
)
from brand_monitor.core.names import avatar_color, normalize_competitor_name
from brand_monitor.core.ranking import (
    build_ranked_entities,
    check_ranking_invariants,
    merge_duplicate_rankings,
    summarize_visibility,
)
from brand_monitor.core.resolver import suggest_competitor_domain
from brand_monitor.core.urls import validate_competitor_url

logger = logging.getLogger(__name__)


def resolve_competitors(
    identified: Sequence[IdentifiedCompetitor],
    config: ResolverConfig | None = None,
) -> list[ResolvedCompetitor]:
    """Canonicalize, deduplicate and attach URLs to detected competitors.

    The first spelling of a competitor keeps its display name; later
    duplicates only fill a missing URL or metadata. A domain suggestion is
    attached when no usable URL was supplied.
    """
    config = config or ResolverConfig()
    by_key: dict[str, ResolvedCompetitor] = {}

    for competitor in identified:
        key = normalize_competitor_name(competitor.name, config.name_synonyms)
        if not key:
            logger.debug("Skipping competitor with empty name")
            continue

        url = validate_competitor_url(competitor.url)
        if competitor.url and url is None:
            logger.debug("Discarding unparseable URL %r for %r", competitor.url, competitor.name)

        existing = by_key.get(key)
        if existing is None:
            by_key[key] = ResolvedCompetitor(
                name=competitor.name.strip(),
                key=key,
                url=url,
                metadata=competitor.metadata,
                color=avatar_color(competitor.name.strip(), config.chart_colors),
            )
            continue

        updates: dict[str, object] = {}
        if existing.url is None and url:
            updates["url"] = url
        if existing.metadata is None and competitor.metadata is not None:
            updates["metadata"] = competitor.metadata
        if updates:
            by_key[key] = existing.model_copy(update=updates)

    resolved: list[ResolvedCompetitor] = []
    for competitor in by_key.values():
        if competitor.url is None:
            suggestion = suggest_competitor_domain(competitor.key, config.competitor_domains)
            competitor = competitor.model_copy(update={"suggestion": suggestion})
        resolved.append(competitor)
    return resolved


def _as_identified(resolved: Sequence[ResolvedCompetitor]) -> list[IdentifiedCompetitor]:
    # Heuristic guesses stay out of display URLs; browsers would fetch them.
    identified = []
    for c in resolved:
        url = c.url
        if url is None and c.suggestion and not c.suggestion.is_guess:
            url = c.suggestion.domain
        identified.append(IdentifiedCompetitor(name=c.name, url=url, metadata=c.metadata))
    return identified


def build_visibility_report(
    company: Company,
    rankings: Sequence[CompetitorRanking],
    identified: Sequence[IdentifiedCompetitor] = (),
    config: ResolverConfig | None = None,
) -> VisibilityReport:
    """Run resolution, classification and ranking for one analysis.

    Data problems are reported in ``errors`` rather than raised.
    """
    config = config or ResolverConfig()
    errors = check_ranking_invariants(rankings, config.name_synonyms)

    merged = merge_duplicate_rankings(rankings, config.name_synonyms)
    if len(merged) < len(rankings):
        logger.info("Merged %d duplicate ranking entries", len(rankings) - len(merged))

    resolved = resolve_competitors(identified, config)
    summary = summarize_visibility(merged)
    if not summary.brand_name:
        summary = summary.model_copy(update={"brand_name": company.name})

    entries = build_ranked_entities(merged, _as_identified(resolved), company, config)

    return VisibilityReport(
        brand=company.name,
        service_type=detect_service_type(company),
        summary=summary,
        entries=entries,
        competitors=resolved,
        errors=errors,
    )
