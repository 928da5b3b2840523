from __future__ import annotations

import math

from src.eval.golden_students import get_golden_opportunities, get_golden_students
from src.finance.budget import (
    EXCELLENT_BENEFIT_MESSAGE,
    GOOD_BENEFIT_MESSAGE,
    HIGH_DEBT_MESSAGE,
    MODERATE_BENEFIT_MESSAGE,
    NEED_BASED_MESSAGE,
    RENEWABLE_MESSAGE,
    calculate_budget_impact,
    calculate_net_benefit,
)
from src.normalize.schema import FinancialProfile, Opportunity


def test_budget_impact_for_renewable_stem_award() -> None:
    profile = get_golden_students()[0].profile.financial_need
    opportunity = get_golden_opportunities()[0]

    impact = calculate_budget_impact(opportunity, profile)

    # 25000 less 22% tax on the 5000 above the tax-free threshold
    assert impact.net_benefit == 23900.0
    assert impact.debt_reduction_present_value == 184002.0
    assert impact.opportunity_cost == 3750.0
    assert impact.payback_period_years == 5.0
    assert impact.recommendations == (
        EXCELLENT_BENEFIT_MESSAGE,
        RENEWABLE_MESSAGE,
        NEED_BASED_MESSAGE,
        HIGH_DEBT_MESSAGE,
    )


def test_net_benefit_scales_with_unmet_need() -> None:
    opportunity = Opportunity(amount=10000)
    profile = FinancialProfile(family_income=100000, financial_need=5000)

    impact = calculate_budget_impact(opportunity, profile)

    assert impact.net_benefit == 7500.0
    assert impact.debt_reduction_present_value == 36800.0
    assert impact.opportunity_cost == 1500.0
    assert impact.payback_period_years == 4.0
    assert impact.recommendations == (GOOD_BENEFIT_MESSAGE,)


def test_no_need_halves_the_benefit() -> None:
    opportunity = Opportunity(amount=10000)
    profile = FinancialProfile(family_income=100000)

    impact = calculate_budget_impact(opportunity, profile)

    assert impact.net_benefit == 5000.0
    assert impact.debt_reduction_present_value == 0.0
    assert impact.recommendations == (MODERATE_BENEFIT_MESSAGE,)


def test_zero_amount_has_no_benefit_and_no_payback() -> None:
    impact = calculate_budget_impact(Opportunity(amount=0), FinancialProfile(family_income=100000, financial_need=1000))

    assert impact.net_benefit == 0.0
    assert impact.opportunity_cost == 0.0
    assert impact.debt_reduction_present_value == 0.0
    assert math.isinf(impact.payback_period_years)


def test_negative_amount_propagates_into_net_benefit() -> None:
    opportunity = Opportunity(amount=-1000)
    profile = FinancialProfile(family_income=100000, financial_need=500)

    assert calculate_net_benefit(opportunity, profile) == -250.0
    assert calculate_budget_impact(opportunity, profile).net_benefit == -250.0


def test_net_benefit_never_exceeds_amount() -> None:
    profile = FinancialProfile(financial_need=1_000_000)
    for amount in (500, 15000, 20000, 45000, 120000):
        assert calculate_net_benefit(Opportunity(amount=amount), profile) <= amount
