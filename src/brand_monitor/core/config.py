"""Configuration model for competitor resolution and ranking display."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from brand_monitor.core.errors import ConfigError
from brand_monitor.core.names import NAME_SYNONYMS
from brand_monitor.core.resolver import COMPETITOR_DOMAINS

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = ".brand-monitor.json"

CHART_COLORS: list[str] = [
    "#3B82F6",  # blue
    "#8B5CF6",  # violet
    "#EC4899",  # pink
    "#10B981",  # emerald
    "#F59E0B",  # amber
    "#6366F1",  # indigo
    "#14B8A6",  # teal
    "#F43F5E",  # rose
]
BRAND_COLOR = "#155DFC"

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


def _clean_keys(table: dict[str, str]) -> dict[str, str]:
    return {k.lower().strip(): v.strip() for k, v in table.items()}


class ResolverConfig(BaseModel):
    """Lookup tables and display settings for one analysis run."""

    name_synonyms: dict[str, str] = Field(
        default_factory=lambda: dict(NAME_SYNONYMS),
        description="Surface spelling -> canonical competitor name",
    )
    competitor_domains: dict[str, str] = Field(
        default_factory=lambda: dict(COMPETITOR_DOMAINS),
        description="Canonical competitor name -> bare domain",
    )
    chart_colors: list[str] = Field(
        default_factory=lambda: list(CHART_COLORS),
        min_length=1,
        description="Palette cycled over competitor rows",
    )
    brand_color: str = Field(default=BRAND_COLOR, description="Color of the tracked brand row")
    max_display_entries: int = Field(
        default=8, ge=1, description="Rows shown in the visibility breakdown"
    )
    favicon_size: int = Field(default=64, ge=16, le=256, description="Favicon size in pixels")

    @field_validator("name_synonyms", "competitor_domains")
    @classmethod
    def _normalize_table_keys(cls, table: dict[str, str]) -> dict[str, str]:
        return _clean_keys(table)

    @field_validator("name_synonyms")
    @classmethod
    def _reject_synonym_chains(cls, table: dict[str, str]) -> dict[str, str]:
        for key, value in table.items():
            target = value.lower()
            if target in table and table[target] != target:
                raise ValueError(
                    f"synonym {key!r} maps to {value!r}, which is itself remapped"
                )
        return {k: v.lower() for k, v in table.items()}

    @field_validator("chart_colors")
    @classmethod
    def _check_palette(cls, colors: list[str]) -> list[str]:
        bad = [c for c in colors if not _HEX_COLOR.match(c)]
        if bad:
            raise ValueError(f"invalid colors: {', '.join(bad)}")
        return colors

    @field_validator("brand_color")
    @classmethod
    def _check_brand_color(cls, color: str) -> str:
        if not _HEX_COLOR.match(color):
            raise ValueError(f"invalid color: {color}")
        return color

    @model_validator(mode="after")
    def _drop_empty_keys(self) -> ResolverConfig:
        self.name_synonyms.pop("", None)
        self.competitor_domains.pop("", None)
        return self


def load_config(path: str | Path | None = None) -> ResolverConfig:
    """Load a ResolverConfig from a JSON file.

    With no path, ``.brand-monitor.json`` in the working directory is used when
    it exists; otherwise the built-in defaults are returned.
    """
    if path is None:
        candidate = Path(DEFAULT_CONFIG_FILE)
        if not candidate.is_file():
            return ResolverConfig()
        path = candidate

    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a JSON object")

    try:
        config = ResolverConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e

    logger.debug(
        "Loaded config from %s (%d synonyms, %d domains)",
        path,
        len(config.name_synonyms),
        len(config.competitor_domains),
    )
    return config
