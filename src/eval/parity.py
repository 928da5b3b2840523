from __future__ import annotations

from dataclasses import replace
from typing import Any, Sequence

from src.normalize.schema import ApplicantProfile
from src.rank.scoring import ScoringEngine
from src.rank.weights import WEIGHT_TOLERANCE

CONSISTENCY_TOLERANCE = 0.001


def _result(test: str, passed: bool, details: str) -> dict[str, Any]:
    return {"test": test, "passed": passed, "details": details}


def check_weight_validation(engine: ScoringEngine) -> dict[str, Any]:
    total = engine.weights.total()
    passed = abs(total - 1.0) < WEIGHT_TOLERANCE
    details = "All weights sum to 1.0" if passed else f"Weights do not sum to 1.0 (sum={total:.6f})"
    return _result("Weight Validation", passed, details)


def check_score_consistency(engine: ScoringEngine, profile: ApplicantProfile) -> dict[str, Any]:
    first = engine.calculate_score(profile)
    second = engine.calculate_score(profile)
    passed = abs(first.total_score - second.total_score) < CONSISTENCY_TOLERANCE and first == second
    details = (
        "Scores are consistent across calls"
        if passed
        else f"Scores vary: {first.total_score} vs {second.total_score}"
    )
    return _result("Score Consistency", passed, details)


def check_score_range(engine: ScoringEngine, profiles: Sequence[ApplicantProfile]) -> dict[str, Any]:
    for profile in profiles:
        score = engine.calculate_score(profile)
        if not (0.0 <= score.total_score <= 100.0 and 0.0 <= score.percentile <= 100.0):
            return _result(
                "Score Range Validation",
                False,
                f"Score out of range: {score.total_score} or percentile: {score.percentile}",
            )
    return _result("Score Range Validation", True, "All scores within valid range (0-100)")


def check_gpa_impact(engine: ScoringEngine, profile: ApplicantProfile) -> dict[str, Any]:
    high = engine.calculate_score(replace(profile, gpa=4.0)).total_score
    low = engine.calculate_score(replace(profile, gpa=2.5)).total_score
    passed = high > low
    details = (
        f"Higher GPA yields higher score: {high} > {low}"
        if passed
        else f"GPA impact incorrect: {high} vs {low}"
    )
    return _result("GPA Impact Verification", passed, details)


def run_parity_checks(engine: ScoringEngine, profiles: Sequence[ApplicantProfile]) -> dict[str, Any]:
    """Behavioural sanity checks for a scoring engine over sample profiles."""
    if not profiles:
        raise ValueError("Parity checks require at least one profile.")

    results = [
        check_weight_validation(engine),
        check_score_consistency(engine, profiles[0]),
        check_score_range(engine, profiles),
        check_gpa_impact(engine, profiles[0]),
    ]
    return {"passed": all(item["passed"] for item in results), "results": results}
