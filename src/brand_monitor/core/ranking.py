"""Visibility ranking: rank order, leader gap, and per-entity display data.

Scores arrive already computed; nothing here changes a score.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TypeVar

from brand_monitor.core.config import ResolverConfig
from brand_monitor.core.models import (
    Company,
    CompetitorRanking,
    IdentifiedCompetitor,
    RankedEntity,
    Standing,
    VisibilitySummary,
)
from brand_monitor.core.names import initials, normalize_competitor_name
from brand_monitor.core.urls import get_domain_from_url

logger = logging.getLogger(__name__)

FAVICON_SERVICE = "https://www.google.com/s2/favicons?domain={domain}&sz={size}"
LOGO_GUESS = "https://{domain}/apple-touch-icon.png"

T = TypeVar("T")


def rank_competitors(rankings: Sequence[CompetitorRanking]) -> list[CompetitorRanking]:
    """Sort by visibility score, highest first; ties keep input order."""
    return sorted(rankings, key=lambda r: r.visibility_score, reverse=True)


def merge_duplicate_rankings(
    rankings: Sequence[CompetitorRanking],
    synonyms: dict[str, str] | None = None,
) -> list[CompetitorRanking]:
    """Collapse entries whose names share a canonical key.

    The highest score survives under the first-seen display name. An entry is
    the tracked brand if any merged entry was; the brand's own score is then
    kept as is.
    """
    merged: dict[str, CompetitorRanking] = {}
    for entry in rankings:
        key = normalize_competitor_name(entry.name, synonyms)
        current = merged.get(key)
        if current is None:
            merged[key] = entry
            continue
        if current.is_own != entry.is_own:
            score = (current if current.is_own else entry).visibility_score
        else:
            score = max(current.visibility_score, entry.visibility_score)
        merged[key] = current.model_copy(update={
            "visibility_score": score,
            "is_own": current.is_own or entry.is_own,
        })
    return list(merged.values())


def check_ranking_invariants(
    rankings: Sequence[CompetitorRanking],
    synonyms: dict[str, str] | None = None,
) -> list[str]:
    """Describe violations of the one-brand, unique-name rules."""
    problems: list[str] = []

    own = [r.name for r in rankings if r.is_own]
    if not own:
        problems.append("No entry is marked as the tracked brand")
    elif len(own) > 1:
        problems.append(f"{len(own)} entries are marked as the tracked brand: {', '.join(own)}")

    seen: dict[str, str] = {}
    for r in rankings:
        key = normalize_competitor_name(r.name, synonyms)
        if key in seen:
            problems.append(f"Duplicate competitor {r.name!r} (same as {seen[key]!r})")
        else:
            seen[key] = r.name

    return problems


def differential_badge(difference: float) -> str:
    """Short delta text shown next to the brand score."""
    if difference > 0:
        return f"+{difference:.1f}% vs #2"
    if difference < 0:
        return f"{difference:.1f}% vs #1"
    return "Equal to #1"


def classify_difference(difference: float) -> Standing:
    if difference > 0:
        return Standing.ahead
    if difference < 0:
        return Standing.behind
    return Standing.equal


def summarize_visibility(
    rankings: Sequence[CompetitorRanking],
    brand: CompetitorRanking | None = None,
) -> VisibilitySummary:
    """Compute the brand's rank and gap to its strongest competitor.

    *brand* defaults to the first entry marked ``is_own``. A brand missing
    from *rankings* is ranked where its score would place it.
    """
    ordered = rank_competitors(rankings)
    if brand is None:
        brand = next((r for r in ordered if r.is_own), None)

    top = next((r for r in ordered if not r.is_own), None)

    if brand is None:
        return VisibilitySummary(
            brand_name="",
            rank=1,
            total_entities=len(ordered),
            top_competitor=top,
        )

    position = next((i for i, r in enumerate(ordered) if r is brand), None)
    if position is None:
        position = next((i for i, r in enumerate(ordered) if r == brand), None)
    if position is None:
        position = sum(1 for r in ordered if r.visibility_score > brand.visibility_score)

    difference = brand.visibility_score - top.visibility_score if top else 0.0
    return VisibilitySummary(
        brand_name=brand.name,
        brand_score=brand.visibility_score,
        rank=position + 1,
        total_entities=len(ordered),
        top_competitor=top,
        difference=difference,
        standing=classify_difference(difference),
        badge=differential_badge(difference),
    )


# ── Display enrichment ───────────────────────────────────────────────────────


def _best_effort(field: str, name: str, derive: Callable[[], T | None]) -> T | None:
    """Run one enrichment step; a failure blanks only that field."""
    try:
        return derive()
    except Exception as e:
        logger.debug("Could not derive %s for %r: %s", field, name, e)
        return None


def favicon_url(domain: str | None, size: int = 64) -> str | None:
    if not domain:
        return None
    return FAVICON_SERVICE.format(domain=domain, size=size)


def logo_guess_url(domain: str | None) -> str | None:
    if not domain:
        return None
    return LOGO_GUESS.format(domain=domain)


def find_identified(
    name: str,
    identified: Sequence[IdentifiedCompetitor],
    synonyms: dict[str, str] | None = None,
) -> IdentifiedCompetitor | None:
    """Match a ranking name to a detected competitor.

    Exact name first, then case-insensitive, then canonical key.
    """
    for c in identified:
        if c.name == name:
            return c
    lowered = name.lower()
    for c in identified:
        if c.name.lower() == lowered:
            return c
    key = normalize_competitor_name(name, synonyms)
    for c in identified:
        if normalize_competitor_name(c.name, synonyms) == key:
            return c
    return None


def _enrich(
    position: int,
    entry: CompetitorRanking,
    identified: Sequence[IdentifiedCompetitor],
    company: Company | None,
    config: ResolverConfig,
) -> RankedEntity:
    size = config.favicon_size
    if entry.is_own:
        domain = _best_effort(
            "domain", entry.name, lambda: get_domain_from_url(company.url if company else None)
        )
        favicon = (company.favicon if company else None) or _best_effort(
            "favicon", entry.name, lambda: favicon_url(domain, size)
        )
        logo = (company.logo if company else None) or _best_effort(
            "logo", entry.name, lambda: logo_guess_url(domain)
        )
        color = config.brand_color
    else:
        match = find_identified(entry.name, identified, config.name_synonyms)
        metadata = match.metadata if match else None
        domain = _best_effort(
            "domain", entry.name, lambda: get_domain_from_url(match.url if match else None)
        )
        favicon = (metadata.favicon if metadata else None) or _best_effort(
            "favicon", entry.name, lambda: favicon_url(domain, size)
        )
        logo = (metadata.logo if metadata else None) or _best_effort(
            "logo", entry.name, lambda: logo_guess_url(domain)
        )
        palette = config.chart_colors
        color = palette[(position - 1) % len(palette)]

    return RankedEntity(
        position=position,
        name=entry.name,
        visibility_score=entry.visibility_score,
        is_own=entry.is_own,
        domain=domain,
        favicon=favicon,
        logo=logo,
        color=color,
        initials=_best_effort("initials", entry.name, lambda: initials(entry.name)) or "",
        bar_width=min(100.0, max(0.0, entry.visibility_score)),
    )


def build_ranked_entities(
    rankings: Sequence[CompetitorRanking],
    identified: Sequence[IdentifiedCompetitor] = (),
    company: Company | None = None,
    config: ResolverConfig | None = None,
) -> list[RankedEntity]:
    """Rank entries and attach favicon, logo, color and bar width to the top rows."""
    config = config or ResolverConfig()
    ordered = rank_competitors(rankings)[: config.max_display_entries]
    return [
        _enrich(i, entry, identified, company, config)
        for i, entry in enumerate(ordered, start=1)
    ]
