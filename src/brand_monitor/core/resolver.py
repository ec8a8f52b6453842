"""Competitor name -> domain resolution: curated lookup, then heuristic guess."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from brand_monitor.core.models import DomainSource, DomainSuggestion

logger = logging.getLogger(__name__)

# ── Curated domains ──────────────────────────────────────────────────────────
# Keys are lowercased canonical names; values carry no scheme.

SCRAPING_TOOLS: dict[str, str] = {
    "apify": "apify.com",
    "scrapy": "scrapy.org",
    "octoparse": "octoparse.com",
    "parsehub": "parsehub.com",
    "diffbot": "diffbot.com",
    "import.io": "import.io",
    "bright data": "brightdata.com",
    "brightdata": "brightdata.com",
    "zyte": "zyte.com",
    "puppeteer": "pptr.dev",
    "playwright": "playwright.dev",
    "selenium": "selenium.dev",
    "beautiful soup": "pypi.org/project/beautifulsoup4",
    "beautifulsoup": "pypi.org/project/beautifulsoup4",
    "scrapfly": "scrapfly.io",
    "crawlbase": "crawlbase.com",
    "webharvy": "webharvy.com",
}

AI_VENDORS: dict[str, str] = {
    "openai": "openai.com",
    "anthropic": "anthropic.com",
    "google ai": "ai.google",
    "microsoft azure": "azure.microsoft.com",
    "ibm watson": "ibm.com/watson",
    "amazon aws": "aws.amazon.com",
    "perplexity": "perplexity.ai",
    "claude": "anthropic.com",
    "chatgpt": "openai.com",
    "gemini": "gemini.google.com",
}

SAAS_PLATFORMS: dict[str, str] = {
    "salesforce": "salesforce.com",
    "hubspot": "hubspot.com",
    "zendesk": "zendesk.com",
    "slack": "slack.com",
    "atlassian": "atlassian.com",
    "monday.com": "monday.com",
    "notion": "notion.so",
    "airtable": "airtable.com",
}

ECOMMERCE_PLATFORMS: dict[str, str] = {
    "shopify": "shopify.com",
    "woocommerce": "woocommerce.com",
    "magento": "magento.com",
    "bigcommerce": "bigcommerce.com",
    "squarespace": "squarespace.com",
    "wix": "wix.com",
}

CLOUD_HOSTING: dict[str, str] = {
    "vercel": "vercel.com",
    "netlify": "netlify.com",
    "aws": "aws.amazon.com",
    "google cloud": "cloud.google.com",
    "azure": "azure.microsoft.com",
    "heroku": "heroku.com",
    "digitalocean": "digitalocean.com",
    "cloudflare": "cloudflare.com",
}

COMPETITOR_DOMAINS: dict[str, str] = {
    **SCRAPING_TOOLS,
    **AI_VENDORS,
    **SAAS_PLATFORMS,
    **ECOMMERCE_PLATFORMS,
    **CLOUD_HOSTING,
}

# ── Heuristic synthesis ──────────────────────────────────────────────────────

_LEGAL_TOKENS = re.compile(r"\b(the|inc|llc|ltd|co|corp|company|corporation)\b")
_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")

MIN_GUESS_LENGTH = 3
"""Compact names shorter than this produce no guess."""


def guess_domain(name: str) -> str | None:
    """Synthesize ``<compact-name>.com`` from a lowercased company name.

    Legal-entity words and punctuation are dropped; ``&`` becomes ``and``.
    """
    cleaned = name.replace("&", " and ")
    cleaned = _LEGAL_TOKENS.sub(" ", cleaned)
    cleaned = _NON_ALNUM.sub(" ", cleaned)
    cleaned = _WHITESPACE.sub(" ", cleaned).strip()
    if not cleaned:
        return None

    compact = _WHITESPACE.sub("", cleaned)
    if len(compact) < MIN_GUESS_LENGTH:
        return None

    return f"{compact}.com"


def suggest_competitor_domain(
    name: str, domains: Mapping[str, str] | None = None
) -> DomainSuggestion | None:
    """Suggest a domain for a competitor name.

    Curated entries win over synthesis. A heuristic suggestion is a guess and
    must be confirmed before anything fetches it.
    """
    normalized = name.lower().strip()
    if not normalized:
        return None

    table = COMPETITOR_DOMAINS if domains is None else domains
    known = table.get(normalized)
    if known:
        return DomainSuggestion(domain=known, source=DomainSource.lookup)

    guess = guess_domain(normalized)
    if guess is None:
        logger.debug("No domain suggestion for competitor %r", name)
        return None
    return DomainSuggestion(domain=guess, source=DomainSource.heuristic)


def assign_url_to_competitor(
    name: str, domains: Mapping[str, str] | None = None
) -> str | None:
    """Return a best-guess bare domain for a competitor name, or None."""
    suggestion = suggest_competitor_domain(name, domains)
    return suggestion.domain if suggestion else None
