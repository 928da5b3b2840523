"""Financial decision engine: effort, ROI, budget impact and portfolio selection."""

from src.finance.budget import calculate_budget_impact
from src.finance.effort import estimate_application_effort
from src.finance.engine import FinancialDecisionEngine
from src.finance.portfolio import GreedyBudgetConstrainedSelector, calculate_max_effort, optimize_portfolio
from src.finance.roi import calculate_roi

__all__ = [
    "FinancialDecisionEngine",
    "GreedyBudgetConstrainedSelector",
    "calculate_budget_impact",
    "calculate_max_effort",
    "calculate_roi",
    "estimate_application_effort",
    "optimize_portfolio",
]
