"""Competitor resolution, service-type classification and visibility ranking."""

from brand_monitor.core.classifier import SERVICE_TYPE_RULES, detect_service_type
from brand_monitor.core.config import ResolverConfig, load_config
from brand_monitor.core.names import NAME_SYNONYMS, normalize_competitor_name
from brand_monitor.core.pipeline import build_visibility_report, resolve_competitors
from brand_monitor.core.ranking import (
    build_ranked_entities,
    rank_competitors,
    summarize_visibility,
)
from brand_monitor.core.resolver import (
    COMPETITOR_DOMAINS,
    assign_url_to_competitor,
    suggest_competitor_domain,
)
from brand_monitor.core.urls import (
    get_domain_from_url,
    normalize_report_url,
    validate_competitor_url,
    validate_url,
)

__all__ = [
    "COMPETITOR_DOMAINS",
    "NAME_SYNONYMS",
    "SERVICE_TYPE_RULES",
    "ResolverConfig",
    "assign_url_to_competitor",
    "build_ranked_entities",
    "build_visibility_report",
    "detect_service_type",
    "get_domain_from_url",
    "load_config",
    "normalize_competitor_name",
    "normalize_report_url",
    "rank_competitors",
    "resolve_competitors",
    "suggest_competitor_domain",
    "summarize_visibility",
    "validate_competitor_url",
    "validate_url",
]
