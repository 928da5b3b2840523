"""Input records, output records and numeric helpers shared by both engines."""

from src.normalize.results import (
    ApplicationEffort,
    BudgetImpact,
    OptimizedPortfolio,
    RiskDistribution,
    ROIAnalysis,
    ScoreBreakdown,
)
from src.normalize.schema import (
    Activity,
    ApplicantProfile,
    Demographics,
    Essay,
    FinancialProfile,
    Opportunity,
    Requirement,
)

__all__ = [
    "Activity",
    "ApplicantProfile",
    "ApplicationEffort",
    "BudgetImpact",
    "Demographics",
    "Essay",
    "FinancialProfile",
    "OptimizedPortfolio",
    "Opportunity",
    "ROIAnalysis",
    "Requirement",
    "RiskDistribution",
    "ScoreBreakdown",
]
