"""Pydantic models for competitor resolution and visibility ranking."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PayloadModel(BaseModel):
    """Accepts the camelCase keys used by upstream JSON payloads."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OutputFormat(str, Enum):
    """Output format for CLI results."""

    json = "json"
    csv = "csv"
    table = "table"


# ── Input records ────────────────────────────────────────────────────────────


class ScrapedData(PayloadModel):
    """Scraped page data for a company; extra scraper keys are kept."""

    model_config = ConfigDict(extra="allow")

    main_content: str | None = None
    keywords: list[str] = Field(default_factory=list)


class Company(PayloadModel):
    """The tracked brand (or a competitor) as produced by the scraping step."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    url: str = ""
    description: str | None = None
    scraped_data: ScrapedData | None = None
    favicon: str | None = Field(default=None, description="Explicit favicon URL")
    logo: str | None = Field(default=None, description="Explicit logo URL")


class CompetitorMetadata(PayloadModel):
    """Optional display metadata attached by competitor detection."""

    model_config = ConfigDict(extra="allow")

    favicon: str | None = None
    logo: str | None = None


class IdentifiedCompetitor(PayloadModel):
    """A competitor reported by the AI detection step."""

    name: str
    url: str | None = None
    metadata: CompetitorMetadata | None = None


class CompetitorRanking(PayloadModel):
    """One scored entity in an analysis run."""

    name: str
    visibility_score: float = Field(ge=0, le=100)
    is_own: bool = False


# ── Resolution ───────────────────────────────────────────────────────────────


class DomainSource(str, Enum):
    """Where a competitor domain came from."""

    lookup = "lookup"
    heuristic = "heuristic"


class DomainSuggestion(PayloadModel):
    """A best-effort domain for a competitor name, never a verified address."""

    domain: str
    source: DomainSource

    @property
    def is_guess(self) -> bool:
        return self.source is DomainSource.heuristic


class ResolvedCompetitor(PayloadModel):
    """A competitor after name canonicalization and URL resolution."""

    name: str = Field(description="Display name as first reported")
    key: str = Field(description="Canonical lowercase name")
    url: str | None = Field(default=None, description="Validated display URL")
    suggestion: DomainSuggestion | None = Field(
        default=None, description="Domain suggestion, set only when no usable URL was given"
    )
    color: str | None = Field(default=None, description="Avatar color for profile lists")
    metadata: CompetitorMetadata | None = None


# ── Ranking output ───────────────────────────────────────────────────────────


class Standing(str, Enum):
    """Where the tracked brand stands relative to its top competitor."""

    ahead = "ahead"
    behind = "behind"
    equal = "equal"

    @property
    def label(self) -> str:
        return _STANDING_LABELS[self]


_STANDING_LABELS: dict[Standing, str] = {
    Standing.ahead: "ahead of #2",
    Standing.behind: "behind #1",
    Standing.equal: "equal to #1",
}


class VisibilitySummary(PayloadModel):
    """Rank and leader gap for the tracked brand."""

    brand_name: str
    brand_score: float = 0.0
    rank: int = Field(ge=1)
    total_entities: int = 0
    top_competitor: CompetitorRanking | None = None
    difference: float = 0.0
    standing: Standing = Standing.equal
    badge: str = "Equal to #1"


class RankedEntity(PayloadModel):
    """Presentation data for one row of the visibility breakdown."""

    position: int = Field(ge=1)
    name: str
    visibility_score: float
    is_own: bool = False
    domain: str | None = None
    favicon: str | None = None
    logo: str | None = None
    color: str
    initials: str = ""
    bar_width: float = Field(default=0.0, ge=0, le=100)


class VisibilityReport(PayloadModel):
    """Everything the report and UI renderers need for one analysis run."""

    brand: str
    service_type: str = "brand"
    summary: VisibilitySummary
    entries: list[RankedEntity] = Field(default_factory=list)
    competitors: list[ResolvedCompetitor] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
