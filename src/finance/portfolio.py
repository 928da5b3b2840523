from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Mapping

import numpy as np
import pandas as pd

from src.finance.budget import calculate_budget_impact
from src.finance.effort import estimate_application_effort
from src.finance.roi import calculate_application_cost, calculate_roi
from src.normalize.numeric import js_round, round_to
from src.normalize.results import OptimizedPortfolio, RiskDistribution
from src.normalize.schema import ApplicantProfile, Opportunity

logger = logging.getLogger(__name__)

BASE_EFFORT_HOURS = 80.0
WORK_HOURS_FACTOR = 0.5
MIN_EFFORT_HOURS = 20.0
MAX_SELECTIONS = 10
RISK_SLOT_BUDGET = 10

RISK_BUCKETS: dict[str, str] = {"low": "safe", "medium": "moderate", "high": "reach"}
RISK_BUCKET_SCORES: dict[str, float] = {"low": 100.0, "medium": 70.0, "high": 40.0}
TARGET_RISK_DISTRIBUTION: dict[str, float] = {"safe": 0.4, "moderate": 0.4, "reach": 0.2}

PORTFOLIO_COLUMNS = [
    "position",
    "opportunity",
    "effort",
    "roi_analysis",
    "budget_impact",
    "amount",
    "estimated_hours",
    "application_cost",
    "roi",
    "win_probability",
    "expected_value",
    "risk_level",
    "risk_bucket",
    "net_benefit",
]


def risk_bucket(risk_level: str) -> str:
    return RISK_BUCKETS.get(risk_level, "moderate")


def calculate_max_effort(profile: ApplicantProfile) -> float:
    """Hours the applicant can spend on applications this cycle."""
    work_hours = sum(activity.hours_per_week or 0.0 for activity in profile.activities if activity.type == "work")
    max_hours = BASE_EFFORT_HOURS - work_hours * WORK_HOURS_FACTOR

    if profile.gpa < 3.0:
        max_hours *= 0.7
    elif profile.gpa < 3.5:
        max_hours *= 0.85

    return max(MIN_EFFORT_HOURS, max_hours)


def build_portfolio_frame(
    opportunities: Iterable[Opportunity],
    profile: ApplicantProfile,
    today: date | None = None,
) -> pd.DataFrame:
    """Assess every opportunity independently and return one row per opportunity, in input order."""
    effective_today = today or date.today()
    rows: list[dict[str, object]] = []
    for position, opportunity in enumerate(opportunities):
        effort = estimate_application_effort(opportunity, today=effective_today)
        roi_analysis = calculate_roi(opportunity, effort)
        budget_impact = calculate_budget_impact(opportunity, profile.financial_need)
        rows.append(
            {
                "position": position,
                "opportunity": opportunity,
                "effort": effort,
                "roi_analysis": roi_analysis,
                "budget_impact": budget_impact,
                "amount": float(opportunity.amount),
                "estimated_hours": effort.estimated_hours,
                "application_cost": calculate_application_cost(effort),
                "roi": roi_analysis.roi,
                "win_probability": roi_analysis.win_probability,
                "expected_value": roi_analysis.expected_value,
                "risk_level": roi_analysis.risk_level,
                "risk_bucket": risk_bucket(roi_analysis.risk_level),
                "net_benefit": budget_impact.net_benefit,
            }
        )

    frame = pd.DataFrame(rows, columns=PORTFOLIO_COLUMNS)
    frame["portfolio_score"] = compute_portfolio_scores(frame)
    return frame


def compute_portfolio_scores(frame: pd.DataFrame) -> np.ndarray:
    if frame.empty:
        return np.array([], dtype=float)

    roi = frame["roi"].to_numpy(dtype=float)
    win_probability = frame["win_probability"].to_numpy(dtype=float)
    net_benefit = frame["net_benefit"].to_numpy(dtype=float)
    risk_scores = frame["risk_level"].map(RISK_BUCKET_SCORES).fillna(RISK_BUCKET_SCORES["high"]).to_numpy(dtype=float)

    roi_score = np.minimum(100.0, roi / 5.0)
    impact_score = np.minimum(100.0, net_benefit / 1000.0)
    return (roi_score * 0.3) + (win_probability * 0.3) + (impact_score * 0.25) + (risk_scores * 0.15)


def rank_portfolio_frame(frame: pd.DataFrame) -> pd.DataFrame:
    # mergesort is stable, so equal scores keep input order.
    return frame.sort_values(by="portfolio_score", ascending=False, kind="mergesort").reset_index(drop=True)


class GreedyBudgetConstrainedSelector:
    """Pick opportunities in score order while they fit the effort and risk budgets.

    This is a single greedy pass, not an optimal (knapsack) solution: a
    candidate is accepted when it fits the remaining hours, its risk bucket has
    not used its share of the slot budget, and fewer than ``max_selections``
    have been accepted. Callers depend on this exact selection; do not replace
    it with an exact optimizer.
    """

    def __init__(
        self,
        max_effort: float,
        *,
        max_selections: int = MAX_SELECTIONS,
        target_distribution: Mapping[str, float] | None = None,
        slot_budget: int = RISK_SLOT_BUDGET,
    ) -> None:
        self.max_effort = max_effort
        self.max_selections = max_selections
        self.target_distribution = dict(target_distribution or TARGET_RISK_DISTRIBUTION)
        self.slot_budget = slot_budget

    def select(self, ranked_frame: pd.DataFrame) -> pd.DataFrame:
        selected_rows: list[int] = []
        total_effort = 0.0
        bucket_counts = {bucket: 0 for bucket in self.target_distribution}

        for index, row in ranked_frame.iterrows():
            hours = float(row["estimated_hours"])
            bucket = str(row["risk_bucket"])
            would_exceed_effort = total_effort + hours > self.max_effort
            risk_limit = self.target_distribution.get(bucket, 0.0) * self.slot_budget
            would_exceed_risk = bucket_counts.get(bucket, 0) >= risk_limit

            if would_exceed_effort or would_exceed_risk or len(selected_rows) >= self.max_selections:
                logger.debug(
                    "Skipping candidate %s (effort=%s, risk_budget=%s, full=%s)",
                    row["opportunity"].opportunity_id,
                    would_exceed_effort,
                    would_exceed_risk,
                    len(selected_rows) >= self.max_selections,
                )
                continue

            selected_rows.append(index)
            total_effort += hours
            bucket_counts[bucket] = bucket_counts.get(bucket, 0) + 1

        return ranked_frame.loc[selected_rows].reset_index(drop=True)


def _risk_distribution(selected: pd.DataFrame) -> RiskDistribution:
    total = len(selected)
    if total == 0:
        return RiskDistribution()
    counts = selected["risk_bucket"].value_counts()
    return RiskDistribution(
        safe=int(js_round(int(counts.get("safe", 0)) / total * 100)),
        moderate=int(js_round(int(counts.get("moderate", 0)) / total * 100)),
        reach=int(js_round(int(counts.get("reach", 0)) / total * 100)),
    )


def _portfolio_roi(selected: pd.DataFrame) -> float:
    if selected.empty:
        return 0.0
    total_expected_return = sum(float(value) for value in selected["expected_value"])
    total_cost = sum(float(value) for value in selected["application_cost"])
    if total_cost == 0.0:
        return 0.0
    return round_to((total_expected_return - total_cost) / total_cost * 100.0, 2)


def summarize_portfolio(selected: pd.DataFrame, max_effort: float) -> OptimizedPortfolio:
    total_potential_award = sum(
        float(amount) * float(probability) / 100.0
        for amount, probability in zip(selected["amount"], selected["win_probability"])
    )
    return OptimizedPortfolio(
        selected_opportunities=tuple(selected["opportunity"]),
        total_potential_award=js_round(total_potential_award),
        total_estimated_effort_hours=int(sum(int(hours) for hours in selected["estimated_hours"])),
        portfolio_roi=_portfolio_roi(selected),
        risk_distribution=_risk_distribution(selected),
        max_effort_hours=max_effort,
        selected_positions=tuple(int(position) for position in selected["position"]),
    )


def optimize_portfolio(
    opportunities: Iterable[Opportunity],
    profile: ApplicantProfile,
    today: date | None = None,
) -> OptimizedPortfolio:
    frame = build_portfolio_frame(opportunities, profile, today=today)
    max_effort = calculate_max_effort(profile)
    selected = GreedyBudgetConstrainedSelector(max_effort).select(rank_portfolio_frame(frame))
    logger.debug(
        "Selected %d of %d opportunities within %.1f hours",
        len(selected),
        len(frame),
        max_effort,
    )
    return summarize_portfolio(selected, max_effort)
