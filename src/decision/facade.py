from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Mapping

import pandas as pd

from src.finance.engine import FinancialDecisionEngine
from src.finance.portfolio import risk_bucket
from src.normalize.results import (
    ApplicationEffort,
    BudgetImpact,
    OptimizedPortfolio,
    ROIAnalysis,
    ScoreBreakdown,
)
from src.normalize.schema import ApplicantProfile, Opportunity
from src.rank.scoring import ScoringEngine
from src.rank.weights import ScoringWeights

logger = logging.getLogger(__name__)

REPORT_COLUMNS = [
    "opportunity_id",
    "title",
    "amount",
    "match_score",
    "estimated_hours",
    "complexity",
    "deadline_stress_level",
    "roi",
    "win_probability",
    "expected_value",
    "risk_level",
    "risk_bucket",
    "net_benefit",
    "selected",
]


@dataclass(frozen=True, slots=True)
class OpportunityAssessment:
    opportunity: Opportunity
    match_score: float
    effort: ApplicationEffort
    roi: ROIAnalysis
    budget_impact: BudgetImpact

    def to_dict(self) -> dict[str, Any]:
        return {
            "opportunity_id": self.opportunity.opportunity_id,
            "title": self.opportunity.title,
            "amount": self.opportunity.amount,
            "match_score": self.match_score,
            "effort": self.effort.to_dict(),
            "roi": self.roi.to_dict(),
            "budget_impact": self.budget_impact.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class DecisionReport:
    applicant_id: str | None
    score: ScoreBreakdown
    assessments: tuple[OpportunityAssessment, ...]
    portfolio: OptimizedPortfolio

    def to_frame(self) -> pd.DataFrame:
        """One row per opportunity, best match first."""
        selected_positions = set(self.portfolio.selected_positions)
        rows = [
            {
                "opportunity_id": item.opportunity.opportunity_id,
                "title": item.opportunity.title,
                "amount": item.opportunity.amount,
                "match_score": item.match_score,
                "estimated_hours": item.effort.estimated_hours,
                "complexity": item.effort.complexity,
                "deadline_stress_level": item.effort.deadline_stress_level,
                "roi": item.roi.roi,
                "win_probability": item.roi.win_probability,
                "expected_value": item.roi.expected_value,
                "risk_level": item.roi.risk_level,
                "risk_bucket": risk_bucket(item.roi.risk_level),
                "net_benefit": item.budget_impact.net_benefit,
                "selected": position in selected_positions,
            }
            for position, item in enumerate(self.assessments)
        ]
        frame = pd.DataFrame(rows, columns=REPORT_COLUMNS)
        return frame.sort_values(by="match_score", ascending=False, kind="mergesort").reset_index(drop=True)

    def to_dict(self) -> dict[str, Any]:
        return {
            "applicant_id": self.applicant_id,
            "score": self.score.to_dict(),
            "assessments": [item.to_dict() for item in self.assessments],
            "portfolio": self.portfolio.to_dict(),
        }


class DecisionFacade:
    """Run the scoring and financial engines together for one applicant."""

    def __init__(
        self,
        scoring_engine: ScoringEngine | None = None,
        financial_engine: FinancialDecisionEngine | None = None,
    ) -> None:
        self.scoring_engine = scoring_engine or ScoringEngine()
        self.financial_engine = financial_engine or FinancialDecisionEngine()

    @classmethod
    def from_config(
        cls,
        weights: ScoringWeights | Mapping[str, Any] | None = None,
        today: date | None = None,
    ) -> DecisionFacade:
        return cls(ScoringEngine(weights), FinancialDecisionEngine(today=today))

    def assess(
        self,
        profile: ApplicantProfile,
        opportunity: Opportunity,
        *,
        base_score: ScoreBreakdown | None = None,
    ) -> OpportunityAssessment:
        effort = self.financial_engine.estimate_application_effort(opportunity)
        return OpportunityAssessment(
            opportunity=opportunity,
            match_score=self.scoring_engine.calculate_scholarship_match(profile, opportunity, base_score=base_score),
            effort=effort,
            roi=self.financial_engine.calculate_roi(opportunity, effort),
            budget_impact=self.financial_engine.calculate_budget_impact(opportunity, profile.financial_need),
        )

    def evaluate(self, profile: ApplicantProfile, opportunities: Iterable[Opportunity]) -> DecisionReport:
        candidates = list(opportunities)
        score = self.scoring_engine.calculate_score(profile)
        assessments = tuple(self.assess(profile, item, base_score=score) for item in candidates)
        portfolio = self.financial_engine.optimize_portfolio(candidates, profile)

        logger.info(
            "Applicant %s: score=%.2f percentile=%.0f, selected %d/%d opportunities (potential award %s)",
            profile.applicant_id,
            score.total_score,
            score.percentile,
            len(portfolio.selected_opportunities),
            len(candidates),
            portfolio.total_potential_award,
        )
        return DecisionReport(
            applicant_id=profile.applicant_id,
            score=score,
            assessments=assessments,
            portfolio=portfolio,
        )
