from __future__ import annotations

import pytest

from src.eval.golden_students import get_golden_students
from src.eval.parity import run_parity_checks
from src.rank.scoring import ScoringEngine


def test_parity_checks_pass_for_default_engine() -> None:
    profiles = [student.profile for student in get_golden_students()]

    result = run_parity_checks(ScoringEngine(), profiles)

    assert result["passed"] is True
    assert [item["test"] for item in result["results"]] == [
        "Weight Validation",
        "Score Consistency",
        "Score Range Validation",
        "GPA Impact Verification",
    ]
    assert all(item["details"] for item in result["results"])


def test_gpa_impact_fails_when_gpa_has_no_weight() -> None:
    engine = ScoringEngine(
        {
            "gpa": 0.0,
            "education": 0.0,
            "demographics": 0.0,
            "financial": 0.5,
            "activities": 0.5,
            "essays": 0.0,
        }
    )

    result = run_parity_checks(engine, [get_golden_students()[0].profile])

    assert result["passed"] is False
    failed = [item["test"] for item in result["results"] if not item["passed"]]
    assert failed == ["GPA Impact Verification"]


def test_parity_checks_require_profiles() -> None:
    with pytest.raises(ValueError, match="at least one profile"):
        run_parity_checks(ScoringEngine(), [])
