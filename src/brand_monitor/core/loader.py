"""Read analysis payloads (company, rankings, detected competitors) from JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from brand_monitor.core.errors import InputError
from brand_monitor.core.models import (
    Company,
    CompetitorRanking,
    IdentifiedCompetitor,
    PayloadModel,
)


class AnalysisPayload(PayloadModel):
    """One analysis run as exported by the brand-monitor API."""

    company: Company
    competitors: list[CompetitorRanking] = Field(default_factory=list)
    identified_competitors: list[IdentifiedCompetitor] = Field(default_factory=list)


def _read_json(path: str | Path) -> Any:
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise InputError(f"Cannot read {path}: {e}") from e
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise InputError(f"Invalid JSON in {path}: {e}") from e


def _validate(model: type[BaseModel], data: Any, source: str | Path) -> Any:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise InputError(f"Invalid payload in {source}: {e}") from e


def load_analysis(path: str | Path) -> AnalysisPayload:
    """Load an analysis payload from a JSON file."""
    return _validate(AnalysisPayload, _read_json(path), path)


def load_company(path: str | Path) -> Company:
    """Load a company record; a full analysis payload is accepted too."""
    data = _read_json(path)
    if isinstance(data, dict) and "company" in data:
        data = data["company"]
    return _validate(Company, data, path)
