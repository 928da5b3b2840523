from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any
from uuid import uuid4

import pandas as pd

from src.normalize.schema import ApplicantProfile, Opportunity
from src.rank.weights import ScoringWeights


def jsonable(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return [jsonable(item) for item in value]
    if isinstance(value, dict):
        return {str(k): jsonable(v) for k, v in value.items()}
    if isinstance(value, float):
        if math.isnan(value):
            return None
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return value
    if isinstance(value, (str, int, bool)):
        return value
    if pd.isna(value):
        return None
    if hasattr(value, "to_dict"):
        return jsonable(value.to_dict())
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return value


def read_json(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"JSON input '{path}' does not exist.")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"JSON input '{path}' is malformed: {exc}") from exc


def write_json_atomic(payload: dict[str, Any], output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = output_path.parent / f"{output_path.name}.{uuid4().hex}.tmp"
    try:
        temp_path.write_text(json.dumps(jsonable(payload), indent=2, sort_keys=True), encoding="utf-8")
        temp_path.replace(output_path)
    finally:
        if temp_path.exists():
            temp_path.unlink()


def load_applicant(path: Path) -> ApplicantProfile:
    payload = read_json(path)
    if not isinstance(payload, dict):
        raise ValueError(f"Applicant file '{path}' must contain a JSON object.")
    return ApplicantProfile.from_mapping(payload)


def load_opportunities(path: Path) -> list[Opportunity]:
    payload = read_json(path)
    if isinstance(payload, dict):
        payload = payload.get("opportunities", payload.get("scholarships"))
    if not isinstance(payload, list):
        raise ValueError(f"Opportunities file '{path}' must contain a JSON list of opportunities.")
    return [Opportunity.from_mapping(item) for item in payload if isinstance(item, dict)]


def load_scoring_weights(path: Path) -> ScoringWeights:
    """Read ``{"scoring_weights": {...}}`` (or a bare mapping) and merge it over the baseline."""
    payload = read_json(path)
    if not isinstance(payload, dict):
        raise ValueError(f"Weights file '{path}' must contain a JSON object.")
    overrides = payload.get("scoring_weights", payload)
    if not isinstance(overrides, dict):
        raise ValueError(f"'scoring_weights' in '{path}' must be a JSON object.")
    return ScoringWeights.from_mapping(overrides)
