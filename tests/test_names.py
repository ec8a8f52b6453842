"""Tests for competitor name canonicalization."""

from __future__ import annotations

import pytest

from brand_monitor.core.names import (
    NAME_SYNONYMS,
    avatar_color,
    initials,
    normalize_competitor_name,
)


def test_synonym_with_parenthetical():
    assert normalize_competitor_name("Amazon Web Services (AWS)") == "aws"


def test_unknown_name_is_lowercased_and_trimmed():
    assert normalize_competitor_name("  Random Co  ") == "random co"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Google Cloud Platform (GCP)", "google cloud"),
        ("GCP", "google cloud"),
        ("Digital Ocean", "digitalocean"),
        ("Beautiful Soup", "beautifulsoup"),
        ("Bright Data", "brightdata"),
        ("Microsoft Azure", "azure"),
        ("amazon aws", "aws"),
    ],
)
def test_known_variants(raw, expected):
    assert normalize_competitor_name(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["Amazon Web Services", "  GCP ", "Shopify", "", "Ünïcode Brand", "aws"],
)
def test_normalization_is_idempotent(raw):
    once = normalize_competitor_name(raw)
    assert normalize_competitor_name(once) == once


def test_synonym_table_keys_are_normalized():
    """Keys must already be lowercase and trimmed or they never match."""
    for key in NAME_SYNONYMS:
        assert key == key.lower().strip()


def test_synonym_values_are_fixed_points():
    for value in NAME_SYNONYMS.values():
        assert normalize_competitor_name(value) == value


def test_custom_synonym_table():
    table = {"acme corp": "acme"}
    assert normalize_competitor_name("ACME Corp", table) == "acme"
    assert normalize_competitor_name("Amazon AWS", table) == "amazon aws"


def test_initials():
    assert initials("Bright Data") == "BD"
    assert initials("acme widgets international") == "AW"
    assert initials("Stripe") == "S"
    assert initials("") == ""


def test_avatar_color_is_stable():
    palette = ["#111111", "#222222", "#333333"]
    assert avatar_color("Acme", palette) == palette[ord("A") % 3]
    assert avatar_color("Acme", palette) == avatar_color("Apex", palette)
    assert avatar_color("", palette) == palette[0]


def test_avatar_color_requires_palette():
    with pytest.raises(ValueError):
        avatar_color("Acme", [])
