from __future__ import annotations

import math

from src.normalize.numeric import annuity_present_value, js_round, round_to
from src.normalize.results import BudgetImpact
from src.normalize.schema import FinancialProfile, Opportunity

OPPORTUNITY_COST_RATE = 0.15
TAX_FREE_THRESHOLD = 20000.0
ASSUMED_TAX_RATE = 0.22
DEBT_INTEREST_RATE = 0.06
DEBT_HORIZON_YEARS = 10
EXPECTED_SALARY_INCREASE = 5000.0
PROGRAM_YEARS = 4.0
LOW_INCOME_THRESHOLD = 50000.0

EXCELLENT_BENEFIT_MESSAGE = "Excellent financial match - high priority application"
GOOD_BENEFIT_MESSAGE = "Good financial benefit - consider applying"
MODERATE_BENEFIT_MESSAGE = "Moderate financial benefit - evaluate time investment"
RENEWABLE_MESSAGE = "Renewable scholarship - factor in multi-year value"
NEED_BASED_MESSAGE = "Focus on need-based scholarships for maximum impact"
HIGH_DEBT_MESSAGE = "High debt risk - prioritize larger scholarships"


def calculate_net_benefit(opportunity: Opportunity, profile: FinancialProfile) -> float:
    amount = opportunity.amount
    if amount == 0.0:
        return 0.0

    taxable_amount = max(0.0, amount - TAX_FREE_THRESHOLD)
    benefit = amount - taxable_amount * ASSUMED_TAX_RATE

    need_adjustment = min(1.0, profile.financial_need / amount)
    benefit *= 0.5 + 0.5 * need_adjustment
    return js_round(benefit)


def calculate_debt_reduction(amount: float, profile: FinancialProfile) -> float:
    covered = min(amount, profile.financial_need)
    return js_round(annuity_present_value(covered, DEBT_INTEREST_RATE, DEBT_HORIZON_YEARS))


def calculate_opportunity_cost(amount: float) -> float:
    return js_round(amount * OPPORTUNITY_COST_RATE)


def calculate_payback_period(amount: float) -> float:
    annual_benefit = min(amount / PROGRAM_YEARS, EXPECTED_SALARY_INCREASE)
    if annual_benefit <= 0.0:
        return math.inf
    return round_to(amount / annual_benefit, 2)


def budget_recommendations(
    opportunity: Opportunity,
    profile: FinancialProfile,
    net_benefit: float,
) -> tuple[str, ...]:
    recommendations: list[str] = []

    if net_benefit > opportunity.amount * 0.8:
        recommendations.append(EXCELLENT_BENEFIT_MESSAGE)
    elif net_benefit > opportunity.amount * 0.5:
        recommendations.append(GOOD_BENEFIT_MESSAGE)
    else:
        recommendations.append(MODERATE_BENEFIT_MESSAGE)

    if opportunity.renewability:
        recommendations.append(RENEWABLE_MESSAGE)

    if profile.family_income < LOW_INCOME_THRESHOLD:
        recommendations.append(NEED_BASED_MESSAGE)

    debt_to_income = profile.financial_need / max(profile.family_income, 1.0)
    if debt_to_income > 1.0:
        recommendations.append(HIGH_DEBT_MESSAGE)

    return tuple(recommendations)


def calculate_budget_impact(opportunity: Opportunity, profile: FinancialProfile) -> BudgetImpact:
    net_benefit = calculate_net_benefit(opportunity, profile)
    return BudgetImpact(
        net_benefit=net_benefit,
        debt_reduction_present_value=calculate_debt_reduction(opportunity.amount, profile),
        opportunity_cost=calculate_opportunity_cost(opportunity.amount),
        payback_period_years=calculate_payback_period(opportunity.amount),
        recommendations=budget_recommendations(opportunity, profile, net_benefit),
    )
