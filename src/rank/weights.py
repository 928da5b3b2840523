from __future__ import annotations

import math
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

WEIGHT_TOLERANCE = 1e-3
WEIGHT_FIELDS: tuple[str, ...] = ("gpa", "education", "demographics", "financial", "activities", "essays")


class ConfigurationError(ValueError):
    """Raised when an engine is built with an invalid weight configuration."""


@dataclass(frozen=True, slots=True)
class ScoringWeights:
    """Importance of each applicant score component; must sum to 1.0."""

    gpa: float
    education: float
    demographics: float
    financial: float
    activities: float
    essays: float

    def __post_init__(self) -> None:
        for field_name in WEIGHT_FIELDS:
            value = float(getattr(self, field_name))
            if not math.isfinite(value):
                raise ConfigurationError(f"Scoring weight '{field_name}' must be finite.")
            if value < 0.0 or value > 1.0:
                raise ConfigurationError(f"Scoring weight '{field_name}' must be between 0.0 and 1.0.")

        total = self.total()
        if not abs(total - 1.0) < WEIGHT_TOLERANCE:
            raise ConfigurationError(
                "Scoring weights must sum to 1.0 "
                f"(received {total:.6f}, tolerance={WEIGHT_TOLERANCE})."
            )

    def total(self) -> float:
        return sum(float(getattr(self, field_name)) for field_name in WEIGHT_FIELDS)

    @classmethod
    def baseline(cls) -> ScoringWeights:
        return cls(
            gpa=0.25,
            education=0.20,
            demographics=0.15,
            financial=0.15,
            activities=0.15,
            essays=0.10,
        )

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any] | None) -> ScoringWeights:
        return cls.baseline().merged(payload)

    def merged(self, payload: Mapping[str, Any] | None) -> ScoringWeights:
        values = payload or {}
        overrides: dict[str, float] = {}
        for field_name in WEIGHT_FIELDS:
            if values.get(field_name) is None:
                continue
            try:
                overrides[field_name] = float(values[field_name])
            except (TypeError, ValueError) as exc:
                raise ConfigurationError(
                    f"Scoring weight '{field_name}' must be numeric (received {values[field_name]!r})."
                ) from exc
        return replace(self, **overrides)

    def to_dict(self) -> dict[str, float]:
        return {item.name: float(getattr(self, item.name)) for item in fields(self)}
