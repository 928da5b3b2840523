from __future__ import annotations

import pytest

from src.rank.scoring import ScoringEngine
from src.rank.weights import ConfigurationError, ScoringWeights


def test_scoring_weights_baseline_sums_to_one() -> None:
    weights = ScoringWeights.baseline()

    assert weights.to_dict() == {
        "gpa": 0.25,
        "education": 0.20,
        "demographics": 0.15,
        "financial": 0.15,
        "activities": 0.15,
        "essays": 0.10,
    }
    assert weights.total() == pytest.approx(1.0)


def test_partial_override_that_breaks_the_sum_fails_at_construction() -> None:
    with pytest.raises(ConfigurationError):
        ScoringEngine({"gpa": 0.5, "education": 0.5})


def test_zero_weight_components_are_accepted_when_sum_is_one() -> None:
    engine = ScoringEngine(
        {
            "gpa": 0.5,
            "education": 0.5,
            "demographics": 0,
            "financial": 0,
            "activities": 0,
            "essays": 0,
        }
    )

    assert engine.weights.demographics == 0.0
    assert engine.weights.total() == pytest.approx(1.0)


def test_configuration_error_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="must sum to 1.0"):
        ScoringWeights(gpa=0.3, education=0.3, demographics=0.3, financial=0.3, activities=0.0, essays=0.0)


def test_sum_within_tolerance_is_accepted() -> None:
    weights = ScoringWeights(
        gpa=0.2505,
        education=0.20,
        demographics=0.15,
        financial=0.15,
        activities=0.15,
        essays=0.10,
    )

    assert weights.gpa == 0.2505


@pytest.mark.parametrize("value", [-0.1, 1.5, float("nan"), float("inf")])
def test_out_of_range_weights_are_rejected(value: float) -> None:
    with pytest.raises(ConfigurationError):
        ScoringWeights.from_mapping({"gpa": value})


def test_non_numeric_weight_raises_configuration_error() -> None:
    with pytest.raises(ConfigurationError, match="must be numeric"):
        ScoringWeights.from_mapping({"gpa": "heavy"})


def test_from_mapping_ignores_unknown_keys_and_none_values() -> None:
    weights = ScoringWeights.from_mapping({"gpa": None, "unknown": 0.9})

    assert weights == ScoringWeights.baseline()


def test_with_weights_returns_new_engine_and_leaves_source_engine_untouched() -> None:
    engine = ScoringEngine()

    reweighted = engine.with_weights({"gpa": 0.30, "essays": 0.05})

    assert reweighted is not engine
    assert reweighted.weights.gpa == 0.30
    assert reweighted.weights.essays == 0.05
    assert engine.weights == ScoringWeights.baseline()


def test_with_weights_validates_the_merged_configuration() -> None:
    engine = ScoringEngine()

    with pytest.raises(ConfigurationError):
        engine.with_weights({"gpa": 0.9})
    assert engine.weights == ScoringWeights.baseline()
