from __future__ import annotations

from datetime import date
from typing import get_args

import pytest

from src.normalize.numeric import format_currency, format_percentage, js_round, round_to
from src.normalize.parsing import coerce_bool, coerce_date, coerce_float, coerce_int, pick
from src.normalize.schema import (
    COMPETITIVENESS_LEVELS,
    Activity,
    ActivityType,
    ApplicantProfile,
    EducationLevel,
    Opportunity,
    Requirement,
    RequirementType,
)
from src.rank.components import ACTIVITY_HOUR_RULES
from src.rank.keywords import EDUCATION_LEVEL_POINTS


def test_pick_returns_first_present_key() -> None:
    payload = {"word_count": None, "wordCount": 250}

    assert pick(payload, "word_count", "wordCount") == 250
    assert pick(payload, "missing", default="x") == "x"


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, 0.0), ("3.5", 3.5), ("n/a", 0.0), (float("nan"), 0.0), (True, 1.0), (7, 7.0)],
)
def test_coerce_float(value: object, expected: float) -> None:
    assert coerce_float(value) == expected


def test_coerce_int_and_bool() -> None:
    assert coerce_int("450") == 450
    assert coerce_int(float("inf")) == 0
    assert coerce_bool("Yes") is True
    assert coerce_bool("no") is False
    assert coerce_bool(1) is True


def test_coerce_date() -> None:
    assert coerce_date("2024-02-28") == date(2024, 2, 28)
    assert coerce_date("not a date") is None
    assert coerce_date(None) is None
    assert coerce_date(date(2024, 1, 1)) == date(2024, 1, 1)


def test_empty_mapping_builds_default_profile() -> None:
    profile = ApplicantProfile.from_mapping({})

    assert profile.gpa == 0.0
    assert profile.activities == ()
    assert profile.essays == ()
    assert profile.applicant_id is None
    assert profile.financial_need.financial_need == 0.0


def test_opportunity_defaults() -> None:
    opportunity = Opportunity.from_mapping({"amount": "2500", "renewable": "true"})

    assert opportunity.amount == 2500.0
    assert opportunity.deadline is None
    assert opportunity.competitiveness == "medium"
    assert opportunity.renewability is True
    assert opportunity.has_essay_requirement is False


@pytest.mark.parametrize(("value", "expected"), [(2.5, 3.0), (-2.5, -2.0), (0.49, 0.0), (184002.17, 184002.0)])
def test_js_round_is_half_up(value: float, expected: float) -> None:
    assert js_round(value) == expected


def test_round_to_and_formatting() -> None:
    assert round_to(203.1578947, 2) == 203.16
    assert round_to(-85.8128, 2) == -85.81
    assert format_currency(5848.0) == "$5,848"
    assert format_currency(-1200.0) == "-$1,200"
    assert format_currency(float("inf")) == "N/A"
    assert format_percentage(123.71, 2) == "123.71%"


def test_vocabularies_line_up_with_scoring_tables() -> None:
    assert set(ACTIVITY_HOUR_RULES) == set(get_args(ActivityType))
    assert set(EDUCATION_LEVEL_POINTS) == set(get_args(EducationLevel))
    assert COMPETITIVENESS_LEVELS == ("low", "medium", "high")
    assert "essay" in get_args(RequirementType)


def test_unknown_codes_are_kept_as_lowercase_text() -> None:
    activity = Activity.from_mapping({"type": "Debate"})
    requirement = Requirement.from_mapping({"type": "Portfolio"})

    assert activity.type == "debate"
    assert requirement.type == "portfolio"
