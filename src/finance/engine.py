from __future__ import annotations

from datetime import date
from typing import Iterable

from src.finance.budget import calculate_budget_impact
from src.finance.effort import estimate_application_effort
from src.finance.portfolio import optimize_portfolio
from src.finance.roi import calculate_roi
from src.normalize.results import ApplicationEffort, BudgetImpact, OptimizedPortfolio, ROIAnalysis
from src.normalize.schema import ApplicantProfile, FinancialProfile, Opportunity


class FinancialDecisionEngine:
    """Budget impact, return-on-effort and portfolio selection for opportunities.

    ``today`` pins the date used for deadline stress; when omitted each call
    uses the current date.
    """

    def __init__(self, today: date | None = None) -> None:
        self.today = today

    def estimate_application_effort(self, opportunity: Opportunity) -> ApplicationEffort:
        return estimate_application_effort(opportunity, today=self.today)

    def calculate_budget_impact(self, opportunity: Opportunity, profile: FinancialProfile) -> BudgetImpact:
        return calculate_budget_impact(opportunity, profile)

    def calculate_roi(self, opportunity: Opportunity, effort: ApplicationEffort) -> ROIAnalysis:
        return calculate_roi(opportunity, effort)

    def optimize_portfolio(
        self,
        opportunities: Iterable[Opportunity],
        profile: ApplicantProfile,
    ) -> OptimizedPortfolio:
        return optimize_portfolio(opportunities, profile, today=self.today)
