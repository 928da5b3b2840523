"""Return-on-effort analysis for a single application."""

from __future__ import annotations

from src.normalize.numeric import round_to
from src.normalize.results import ApplicationEffort, ROIAnalysis
from src.normalize.schema import Opportunity

APPLICATION_HOUR_VALUE = 25.0
STRESS_UNIT_COST = 50.0
WIN_PROBABILITY_CAP = 50.0

COMPLEXITY_COST_MULTIPLIERS: dict[str, float] = {"low": 1.0, "medium": 1.5, "high": 2.5}
BASE_WIN_RATES: dict[str, float] = {"low": 25.0, "medium": 10.0, "high": 3.0}
EFFORT_QUALITY_MULTIPLIERS: dict[str, float] = {"low": 0.7, "medium": 1.0, "high": 1.5}
RISK_ADJUSTMENT_FACTORS: dict[str, float] = {"low": 0.9, "medium": 0.7, "high": 0.4}

COMPETITION_RISK_POINTS: dict[str, int] = {"low": 1, "medium": 2, "high": 3}
COMPLEXITY_RISK_POINTS: dict[str, int] = {"low": 0, "medium": 1, "high": 2}
HIGH_RISK_CUTOFF = 6
MEDIUM_RISK_CUTOFF = 3


def calculate_application_cost(effort: ApplicationEffort) -> float:
    time_cost = effort.estimated_hours * APPLICATION_HOUR_VALUE
    multiplier = COMPLEXITY_COST_MULTIPLIERS.get(effort.complexity, 1.0)
    stress_cost = effort.deadline_stress_level * STRESS_UNIT_COST
    return time_cost * multiplier + stress_cost


def calculate_win_probability(opportunity: Opportunity, effort: ApplicationEffort) -> float:
    """Heuristic success chance in percent; never above ``WIN_PROBABILITY_CAP``."""
    base_rate = BASE_WIN_RATES.get(opportunity.competitiveness, BASE_WIN_RATES["medium"])
    effort_multiplier = EFFORT_QUALITY_MULTIPLIERS.get(effort.complexity, 1.0)
    stress_adjustment = max(0.5, 1.0 - (effort.deadline_stress_level * 0.1))
    return min(WIN_PROBABILITY_CAP, base_rate * effort_multiplier * stress_adjustment)


def calculate_expected_value(opportunity: Opportunity, effort: ApplicationEffort) -> float:
    win_probability = calculate_win_probability(opportunity, effort)
    risk_factor = RISK_ADJUSTMENT_FACTORS.get(opportunity.competitiveness, RISK_ADJUSTMENT_FACTORS["medium"])
    return win_probability * (opportunity.amount * risk_factor) / 100.0


def assess_risk_level(opportunity: Opportunity, effort: ApplicationEffort) -> str:
    risk_score = COMPETITION_RISK_POINTS.get(opportunity.competitiveness, 1)
    risk_score += COMPLEXITY_RISK_POINTS.get(effort.complexity, 0)

    if effort.deadline_stress_level >= 8:
        risk_score += 2
    elif effort.deadline_stress_level >= 5:
        risk_score += 1

    if opportunity.amount >= 20000:
        risk_score += 1
    if opportunity.amount >= 50000:
        risk_score += 1

    if risk_score >= HIGH_RISK_CUTOFF:
        return "high"
    if risk_score >= MEDIUM_RISK_CUTOFF:
        return "medium"
    return "low"


def calculate_roi(opportunity: Opportunity, effort: ApplicationEffort) -> ROIAnalysis:
    application_cost = calculate_application_cost(effort)
    expected_value = calculate_expected_value(opportunity, effort)
    if application_cost == 0.0:
        roi = 0.0
    else:
        roi = (expected_value - application_cost) / application_cost * 100.0

    return ROIAnalysis(
        roi=round_to(roi, 2),
        win_probability=round_to(calculate_win_probability(opportunity, effort), 2),
        expected_value=round_to(expected_value, 2),
        risk_level=assess_risk_level(opportunity, effort),
        time_to_complete=effort.estimated_hours,
    )
