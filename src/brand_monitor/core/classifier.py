"""Service-type classification for the tracked brand."""

from __future__ import annotations

from typing import NamedTuple

from brand_monitor.core.models import Company

DEFAULT_SERVICE_TYPE = "brand"


class ServiceTypeRule(NamedTuple):
    """Keyword sets checked by substring against lowercased company text."""

    label: str
    description: tuple[str, ...] = ()
    content: tuple[str, ...] = ()
    name: tuple[str, ...] = ()

    def matches(self, description: str, content: str, name: str) -> bool:
        return (
            any(k in description for k in self.description)
            or any(k in content for k in self.content)
            or any(k in name for k in self.name)
        )


SERVICE_TYPE_RULES: list[ServiceTypeRule] = [
    ServiceTypeRule(
        "beverage brand",
        description=("beverage", "drink", "cola", "soda"),
        content=("beverage", "refreshment"),
        name=("coca", "pepsi"),
    ),
    ServiceTypeRule(
        "restaurant",
        description=("restaurant", "food", "dining"),
        content=("menu", "restaurant"),
    ),
    ServiceTypeRule(
        "retailer",
        description=("retail", "store", "shopping"),
        content=("retail", "shopping"),
    ),
    ServiceTypeRule(
        "financial service",
        description=("bank", "financial", "finance"),
        content=("banking", "financial services"),
    ),
    ServiceTypeRule(
        "web scraper",
        description=("scraping", "crawl", "extract"),
        content=("web scraping", "data extraction"),
    ),
    ServiceTypeRule(
        "AI tool",
        description=("ai", "artificial intelligence", "llm"),
        content=("machine learning", "ai-powered"),
    ),
    ServiceTypeRule(
        "hosting platform",
        description=("hosting", "deploy", "cloud"),
        content=("deployment", "infrastructure"),
    ),
    ServiceTypeRule(
        "e-commerce platform",
        description=("e-commerce", "online store", "marketplace"),
    ),
    ServiceTypeRule(
        "software",
        description=("software", "saas", "platform"),
    ),
]
"""Evaluated top-down, first match wins. Order is the tie-break."""


def detect_service_type(
    company: Company, rules: list[ServiceTypeRule] | None = None
) -> str:
    """Label a company with its service category."""
    description = (company.description or "").lower()
    content = (
        (company.scraped_data.main_content if company.scraped_data else None) or ""
    ).lower()
    name = (company.name or "").lower()

    for rule in SERVICE_TYPE_RULES if rules is None else rules:
        if rule.matches(description, content, name):
            return rule.label
    return DEFAULT_SERVICE_TYPE
