"""Competitor name canonicalization.

Different surface spellings of the same competitor ("Amazon Web Services",
"Amazon AWS", "AWS") collapse to one lowercase key before ranking.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

# Keys are lowercased and trimmed. Values are never keys themselves, which
# keeps normalize_competitor_name idempotent.
NAME_SYNONYMS: dict[str, str] = {
    "amazon web services": "aws",
    "amazon web services (aws)": "aws",
    "amazon aws": "aws",
    "microsoft azure": "azure",
    "google cloud platform": "google cloud",
    "google cloud platform (gcp)": "google cloud",
    "gcp": "google cloud",
    "digital ocean": "digitalocean",
    "beautiful soup": "beautifulsoup",
    "bright data": "brightdata",
}


def normalize_competitor_name(
    name: str, synonyms: Mapping[str, str] | None = None
) -> str:
    """Map a competitor name to its canonical lowercase key."""
    normalized = name.lower().strip()
    table = NAME_SYNONYMS if synonyms is None else synonyms
    return table.get(normalized) or normalized


def initials(name: str) -> str:
    """First letters of the first two words, upper-cased."""
    return "".join(word[0] for word in name.split()).upper()[:2]


def avatar_color(name: str, palette: Sequence[str]) -> str:
    """Pick a stable palette color from the first character of *name*."""
    if not palette:
        raise ValueError("palette must not be empty")
    if not name:
        return palette[0]
    return palette[ord(name[0]) % len(palette)]
