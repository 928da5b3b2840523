from __future__ import annotations

from datetime import date

import pandas as pd
import pytest

from src.eval.golden_students import GOLDEN_EVAL_TODAY, get_golden_opportunities, get_golden_students
from src.finance.portfolio import (
    GreedyBudgetConstrainedSelector,
    build_portfolio_frame,
    calculate_max_effort,
    optimize_portfolio,
    rank_portfolio_frame,
)
from src.normalize.schema import Activity, ApplicantProfile, Opportunity


def _safe(index: int) -> Opportunity:
    return Opportunity(opportunity_id=f"safe-{index}", amount=5000, competitiveness="low")


def _moderate(index: int) -> Opportunity:
    return Opportunity(opportunity_id=f"moderate-{index}", amount=20000, competitiveness="low")


def _reach(index: int) -> Opportunity:
    return Opportunity(opportunity_id=f"reach-{index}", amount=20000, competitiveness="high")


def _ranked(opportunities: list[Opportunity]) -> pd.DataFrame:
    frame = build_portfolio_frame(opportunities, ApplicantProfile(gpa=3.9), today=date(2026, 1, 1))
    return rank_portfolio_frame(frame)


def test_golden_portfolio_selection() -> None:
    profile = get_golden_students()[0].profile

    portfolio = optimize_portfolio(get_golden_opportunities(), profile, today=GOLDEN_EVAL_TODAY)

    assert [item.opportunity_id for item in portfolio.selected_opportunities] == [
        "scholarship-003",
        "scholarship-004",
        "scholarship-002",
    ]
    assert portfolio.max_effort_hours == 70.0
    assert portfolio.total_estimated_effort_hours == 61
    assert portfolio.total_potential_award == 5848.0
    assert portfolio.portfolio_roi == 123.71
    assert portfolio.risk_distribution.to_dict() == {"safe": 67, "moderate": 33, "reach": 0}


def test_ranked_frame_orders_by_portfolio_score() -> None:
    profile = get_golden_students()[0].profile
    frame = build_portfolio_frame(get_golden_opportunities(), profile, today=GOLDEN_EVAL_TODAY)

    ranked = rank_portfolio_frame(frame)

    assert [item.opportunity_id for item in ranked["opportunity"]] == [
        "scholarship-003",
        "scholarship-004",
        "scholarship-002",
        "scholarship-005",
        "scholarship-001",
    ]
    assert ranked.loc[0, "portfolio_score"] == pytest.approx(33.6896)
    assert ranked["portfolio_score"].is_monotonic_decreasing


def test_selection_respects_effort_budget_for_every_golden_student() -> None:
    for student in get_golden_students():
        portfolio = optimize_portfolio(get_golden_opportunities(), student.profile, today=GOLDEN_EVAL_TODAY)

        assert portfolio.total_estimated_effort_hours <= portfolio.max_effort_hours
        assert len(portfolio.selected_opportunities) <= 10


def test_max_effort_accounts_for_work_and_gpa() -> None:
    assert calculate_max_effort(get_golden_students()[2].profile) == pytest.approx(55.25)
    assert calculate_max_effort(ApplicantProfile(gpa=3.9)) == 80.0
    assert calculate_max_effort(ApplicantProfile(gpa=2.5)) == pytest.approx(56.0)

    overworked = ApplicantProfile(gpa=3.9, activities=(Activity(type="work", hours_per_week=200),))
    assert calculate_max_effort(overworked) == 20.0


def test_risk_buckets_are_capped_by_target_distribution() -> None:
    opportunities = [build(index) for index in range(6) for build in (_safe, _moderate, _reach)]
    frame = _ranked(opportunities)

    selected = GreedyBudgetConstrainedSelector(max_effort=1000).select(frame)

    assert len(selected) == 10
    assert selected["risk_bucket"].value_counts().to_dict() == {"safe": 4, "moderate": 4, "reach": 2}


def test_identical_safe_opportunities_keep_input_order() -> None:
    opportunities = [_safe(index) for index in range(12)]

    portfolio = optimize_portfolio(opportunities, ApplicantProfile(gpa=3.9), today=date(2026, 1, 1))

    assert [item.opportunity_id for item in portfolio.selected_opportunities] == [
        "safe-0",
        "safe-1",
        "safe-2",
        "safe-3",
    ]
    assert portfolio.total_estimated_effort_hours == 40
    assert portfolio.risk_distribution.to_dict() == {"safe": 100, "moderate": 0, "reach": 0}


def test_selector_never_exceeds_max_selections() -> None:
    opportunities = [build(index) for index in range(6) for build in (_safe, _moderate, _reach)]
    frame = _ranked(opportunities)
    selector = GreedyBudgetConstrainedSelector(
        max_effort=1000,
        target_distribution={"safe": 1.0, "moderate": 1.0, "reach": 1.0},
    )

    assert len(selector.select(frame)) == 10


def test_selector_skips_candidates_that_do_not_fit() -> None:
    opportunities = [_reach(0), _safe(0), _moderate(0)]
    frame = _ranked(opportunities)

    selected = GreedyBudgetConstrainedSelector(max_effort=12).select(frame)

    assert [item.opportunity_id for item in selected["opportunity"]] == ["safe-0"]


def test_empty_portfolio() -> None:
    portfolio = optimize_portfolio([], ApplicantProfile(gpa=3.9), today=date(2026, 1, 1))

    assert portfolio.selected_opportunities == ()
    assert portfolio.total_potential_award == 0.0
    assert portfolio.total_estimated_effort_hours == 0
    assert portfolio.portfolio_roi == 0.0
    assert portfolio.risk_distribution.to_dict() == {"safe": 0, "moderate": 0, "reach": 0}


def test_build_portfolio_frame_is_deterministic() -> None:
    profile = get_golden_students()[1].profile
    scalar_columns = [
        "amount",
        "estimated_hours",
        "application_cost",
        "roi",
        "risk_bucket",
        "net_benefit",
        "portfolio_score",
    ]

    first = build_portfolio_frame(get_golden_opportunities(), profile, today=GOLDEN_EVAL_TODAY)
    second = build_portfolio_frame(get_golden_opportunities(), profile, today=GOLDEN_EVAL_TODAY)

    pd.testing.assert_frame_equal(first[scalar_columns], second[scalar_columns])
    assert first["position"].tolist() == [0, 1, 2, 3, 4]
