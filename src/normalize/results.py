from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from src.normalize.schema import Opportunity


@dataclass(frozen=True, slots=True)
class ScoreBreakdown:
    """Weighted component scores; each entry is already multiplied by its weight."""

    gpa: float
    education: float
    demographics: float
    financial: float
    activities: float
    essays: float
    total_score: float
    percentile: float
    recommendations: tuple[str, ...]

    def components(self) -> dict[str, float]:
        return {
            "gpa": self.gpa,
            "education": self.education,
            "demographics": self.demographics,
            "financial": self.financial,
            "activities": self.activities,
            "essays": self.essays,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_score": self.total_score,
            "breakdown": self.components(),
            "percentile": self.percentile,
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True, slots=True)
class ApplicationEffort:
    estimated_hours: int
    complexity: str
    deadline_stress_level: int
    required_documents: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "estimated_hours": self.estimated_hours,
            "complexity": self.complexity,
            "deadline_stress_level": self.deadline_stress_level,
            "required_documents": list(self.required_documents),
        }


@dataclass(frozen=True, slots=True)
class ROIAnalysis:
    roi: float
    win_probability: float
    expected_value: float
    risk_level: str
    time_to_complete: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "roi": self.roi,
            "win_probability": self.win_probability,
            "expected_value": self.expected_value,
            "risk_level": self.risk_level,
            "time_to_complete": self.time_to_complete,
        }


@dataclass(frozen=True, slots=True)
class BudgetImpact:
    net_benefit: float
    debt_reduction_present_value: float
    opportunity_cost: float
    payback_period_years: float
    recommendations: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "net_benefit": self.net_benefit,
            "debt_reduction_present_value": self.debt_reduction_present_value,
            "opportunity_cost": self.opportunity_cost,
            "payback_period_years": self.payback_period_years,
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True, slots=True)
class RiskDistribution:
    safe: int = 0
    moderate: int = 0
    reach: int = 0

    def to_dict(self) -> dict[str, int]:
        return {"safe": self.safe, "moderate": self.moderate, "reach": self.reach}


@dataclass(frozen=True, slots=True)
class OptimizedPortfolio:
    selected_opportunities: tuple[Opportunity, ...]
    total_potential_award: float
    total_estimated_effort_hours: int
    portfolio_roi: float
    risk_distribution: RiskDistribution
    max_effort_hours: float
    selected_positions: tuple[int, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "selected_opportunity_ids": [item.opportunity_id for item in self.selected_opportunities],
            "selected_positions": list(self.selected_positions),
            "total_potential_award": self.total_potential_award,
            "total_estimated_effort_hours": self.total_estimated_effort_hours,
            "portfolio_roi": self.portfolio_roi,
            "risk_distribution": self.risk_distribution.to_dict(),
            "max_effort_hours": self.max_effort_hours,
        }
