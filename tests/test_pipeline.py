"""Tests for competitor resolution and full visibility-report assembly."""

from __future__ import annotations

from brand_monitor.core.config import ResolverConfig
from brand_monitor.core.models import (
    Company,
    CompetitorMetadata,
    CompetitorRanking,
    DomainSource,
    IdentifiedCompetitor,
    ScrapedData,
    Standing,
)
from brand_monitor.core.pipeline import build_visibility_report, resolve_competitors


def _company() -> Company:
    return Company(
        name="Crawlly",
        url="https://crawlly.io",
        description="Crawl any site and extract structured data",
        scraped_data=ScrapedData(main_content="Web scraping for teams", keywords=["scraping"]),
    )


def _rankings() -> list[CompetitorRanking]:
    return [
        CompetitorRanking(name="Crawlly", visibility_score=40, is_own=True),
        CompetitorRanking(name="Apify", visibility_score=55),
        CompetitorRanking(name="Bright Data", visibility_score=30),
        CompetitorRanking(name="Acme Scrapers Inc", visibility_score=12),
    ]


# ── resolve_competitors ──────────────────────────────────────────────────────


def test_resolve_collapses_spellings():
    resolved = resolve_competitors([
        IdentifiedCompetitor(name="Amazon Web Services"),
        IdentifiedCompetitor(name="AWS", url="https://aws.amazon.com/"),
        IdentifiedCompetitor(name="amazon aws"),
    ])

    assert len(resolved) == 1
    aws = resolved[0]
    assert aws.name == "Amazon Web Services"
    assert aws.key == "aws"
    assert aws.url == "aws.amazon.com"
    assert aws.suggestion is None


def test_resolve_assigns_avatar_color_from_palette():
    palette = ["#111111", "#222222", "#333333"]
    config = ResolverConfig(chart_colors=palette)
    (vercel,) = resolve_competitors([IdentifiedCompetitor(name="Vercel")], config)

    assert vercel.color == "#333333"  # ord("V") % 3


def test_resolve_first_metadata_wins():
    resolved = resolve_competitors([
        IdentifiedCompetitor(name="Zyte", metadata=CompetitorMetadata(favicon="a.png")),
        IdentifiedCompetitor(name="zyte", metadata=CompetitorMetadata(favicon="b.png")),
    ])
    assert resolved[0].metadata.favicon == "a.png"


def test_resolve_fills_missing_metadata_from_duplicate():
    resolved = resolve_competitors([
        IdentifiedCompetitor(name="Zyte"),
        IdentifiedCompetitor(name="ZYTE", metadata=CompetitorMetadata(favicon="b.png")),
    ])
    assert resolved[0].metadata.favicon == "b.png"


def test_resolve_suggests_domain_only_without_url():
    resolved = resolve_competitors([
        IdentifiedCompetitor(name="Shopify"),
        IdentifiedCompetitor(name="Acme Widgets Inc"),
        IdentifiedCompetitor(name="Netlify", url="https://app.netlify.com/teams"),
        IdentifiedCompetitor(name="Co"),
    ])
    by_key = {c.key: c for c in resolved}

    assert by_key["shopify"].suggestion.source is DomainSource.lookup
    assert by_key["shopify"].suggestion.domain == "shopify.com"
    assert by_key["acme widgets inc"].suggestion.is_guess is True
    assert by_key["acme widgets inc"].suggestion.domain == "acmewidgets.com"
    assert by_key["netlify"].url == "app.netlify.com/teams"
    assert by_key["netlify"].suggestion is None
    assert by_key["co"].suggestion is None


def test_resolve_unparseable_url_falls_back_to_suggestion():
    (vercel,) = resolve_competitors([IdentifiedCompetitor(name="Vercel", url="https://[bad")])
    assert vercel.url is None
    assert vercel.suggestion.domain == "vercel.com"


def test_resolve_skips_blank_names():
    assert resolve_competitors([IdentifiedCompetitor(name="   ")]) == []


def test_resolve_uses_config_tables():
    config = ResolverConfig(
        name_synonyms={"Acme Corporation": "acme"},
        competitor_domains={"acme": "acme.example"},
    )
    (acme,) = resolve_competitors([IdentifiedCompetitor(name="ACME Corporation")], config)
    assert acme.key == "acme"
    assert acme.suggestion.domain == "acme.example"
    assert acme.suggestion.is_guess is False


# ── build_visibility_report ──────────────────────────────────────────────────


def test_report_end_to_end():
    identified = [
        IdentifiedCompetitor(name="Apify"),
        IdentifiedCompetitor(name="Bright Data"),
        IdentifiedCompetitor(name="Acme Scrapers Inc"),
    ]
    report = build_visibility_report(_company(), _rankings(), identified)

    assert report.brand == "Crawlly"
    assert report.service_type == "web scraper"
    assert report.errors == []

    assert report.summary.rank == 2
    assert report.summary.top_competitor.name == "Apify"
    assert report.summary.difference == -15
    assert report.summary.standing is Standing.behind

    entries = {e.name: e for e in report.entries}
    assert [e.name for e in report.entries] == [
        "Apify", "Crawlly", "Bright Data", "Acme Scrapers Inc",
    ]
    assert entries["Crawlly"].domain == "crawlly.io"
    assert entries["Apify"].domain == "apify.com"
    assert entries["Bright Data"].domain == "brightdata.com"
    # Heuristic guesses never become display URLs.
    assert entries["Acme Scrapers Inc"].domain is None
    assert entries["Acme Scrapers Inc"].favicon is None

    keys = [c.key for c in report.competitors]
    assert keys == ["apify", "brightdata", "acme scrapers inc"]


def test_report_collects_invariant_problems_without_raising():
    rankings = [
        CompetitorRanking(name="AWS", visibility_score=20),
        CompetitorRanking(name="Amazon Web Services", visibility_score=35),
    ]
    report = build_visibility_report(Company(name="Tiny", url="tiny.dev"), rankings)

    assert "No entry is marked as the tracked brand" in report.errors
    assert len(report.entries) == 1
    assert report.entries[0].visibility_score == 35
    assert report.summary.brand_name == "Tiny"
    assert report.service_type == "brand"


def test_report_with_only_the_brand():
    report = build_visibility_report(
        Company(name="Solo", url="solo.app"),
        [CompetitorRanking(name="Solo", visibility_score=12, is_own=True)],
    )
    assert report.summary.rank == 1
    assert report.summary.top_competitor is None
    assert report.summary.badge == "Equal to #1"
    assert report.competitors == []
