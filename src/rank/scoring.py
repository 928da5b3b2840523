from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from src.normalize.numeric import clamp, round_to
from src.normalize.parsing import coerce_optional_float, normalize_text
from src.normalize.results import ScoreBreakdown
from src.normalize.schema import ApplicantProfile, Opportunity
from src.rank.components import (
    activities_score,
    demographics_score,
    education_score,
    essays_score,
    financial_score,
    gpa_score,
    percentile_for_score,
)
from src.rank.weights import ScoringWeights

logger = logging.getLogger(__name__)

GENERAL_RECOMMENDATIONS: tuple[str, ...] = (
    "Apply to a mix of reach, match, and safety scholarships",
    "Start applications early to avoid rushing",
)

# (component, weighted threshold, advice) - advice applies when the weighted score is below the threshold.
COMPONENT_RECOMMENDATIONS: tuple[tuple[str, float, tuple[str, ...]], ...] = (
    (
        "gpa",
        20.0,
        (
            "Focus on improving your GPA - consider tutoring or study groups",
            "Look for scholarships that prioritize other factors over GPA",
        ),
    ),
    (
        "activities",
        12.0,
        (
            "Increase your extracurricular involvement, especially leadership roles",
            "Consider volunteer work in your field of study",
        ),
    ),
    (
        "essays",
        8.0,
        (
            "Invest more time in crafting compelling scholarship essays",
            "Seek feedback from mentors or writing centers",
        ),
    ),
    (
        "financial",
        12.0,
        (
            "Ensure your FAFSA is completed accurately",
            "Look into need-based scholarships and grants",
        ),
    ),
)

GPA_MET_ADJUSTMENT = 0.10
GPA_UNMET_ADJUSTMENT = -0.20
MAJOR_MATCH_ADJUSTMENT = 0.15
DEMOGRAPHIC_ADJUSTMENT = 0.05
FINANCIAL_MET_ADJUSTMENT = 0.10


@dataclass(frozen=True, slots=True)
class MatchResult:
    opportunity: Opportunity
    match_score: float
    base_score: ScoreBreakdown


def generate_recommendations(components: Mapping[str, float]) -> tuple[str, ...]:
    recommendations: list[str] = []
    for component, threshold, advice in COMPONENT_RECOMMENDATIONS:
        if components[component] < threshold:
            recommendations.extend(advice)
    recommendations.extend(GENERAL_RECOMMENDATIONS)
    return tuple(recommendations)


def _requirement_adjustment(profile: ApplicantProfile, requirement_type: str, value: Any) -> float:
    if requirement_type == "gpa":
        minimum = coerce_optional_float(value)
        if minimum is not None and profile.gpa >= minimum:
            return GPA_MET_ADJUSTMENT
        return GPA_UNMET_ADJUSTMENT
    if requirement_type == "major":
        wanted = normalize_text(value).lower()
        if wanted in profile.major.lower():
            return MAJOR_MATCH_ADJUSTMENT
        return 0.0
    if requirement_type == "demographic":
        # Applied without checking the applicant against the requirement value.
        return DEMOGRAPHIC_ADJUSTMENT
    if requirement_type == "financial":
        threshold = coerce_optional_float(value)
        if threshold is not None and profile.financial_need.expected_family_contribution <= threshold:
            return FINANCIAL_MET_ADJUSTMENT
        return 0.0
    return 0.0


class ScoringEngine:
    """Weighted 0-100 applicant scorer.

    Weights are fixed for the lifetime of an engine; use ``with_weights`` to get
    an engine with a different configuration.
    """

    __slots__ = ("_weights",)

    def __init__(self, weights: ScoringWeights | Mapping[str, Any] | None = None) -> None:
        if isinstance(weights, ScoringWeights):
            self._weights = weights
        else:
            self._weights = ScoringWeights.from_mapping(weights)

    @property
    def weights(self) -> ScoringWeights:
        return self._weights

    def with_weights(self, overrides: Mapping[str, Any]) -> ScoringEngine:
        return ScoringEngine(self._weights.merged(overrides))

    def calculate_score(self, profile: ApplicantProfile) -> ScoreBreakdown:
        weights = self._weights
        components = {
            "gpa": gpa_score(profile.gpa) * weights.gpa,
            "education": education_score(profile) * weights.education,
            "demographics": demographics_score(profile.demographics) * weights.demographics,
            "financial": financial_score(profile.financial_need) * weights.financial,
            "activities": activities_score(profile.activities) * weights.activities,
            "essays": essays_score(profile.essays) * weights.essays,
        }
        total_score = sum(components.values())
        logger.debug("Scored applicant %s: total=%.4f components=%s", profile.applicant_id, total_score, components)

        return ScoreBreakdown(
            gpa=components["gpa"],
            education=components["education"],
            demographics=components["demographics"],
            financial=components["financial"],
            activities=components["activities"],
            essays=components["essays"],
            total_score=clamp(round_to(total_score, 2)),
            percentile=clamp(percentile_for_score(total_score)),
            recommendations=generate_recommendations(components),
        )

    def calculate_scholarship_match(
        self,
        profile: ApplicantProfile,
        opportunity: Opportunity,
        *,
        base_score: ScoreBreakdown | None = None,
    ) -> float:
        """Scale the applicant's total score by how well they fit one opportunity.

        Each requirement nudges a single multiplier that starts at 1.0; the
        result is clamped to [0, 100].
        """
        score = base_score if base_score is not None else self.calculate_score(profile)
        multiplier = 1.0
        for requirement in opportunity.requirements:
            multiplier += _requirement_adjustment(profile, requirement.type, requirement.value)
        return clamp(score.total_score * multiplier)

    def batch_calculate_matches(
        self,
        profile: ApplicantProfile,
        opportunities: Iterable[Opportunity],
    ) -> list[MatchResult]:
        base_score = self.calculate_score(profile)
        results = [
            MatchResult(
                opportunity=opportunity,
                match_score=self.calculate_scholarship_match(profile, opportunity, base_score=base_score),
                base_score=base_score,
            )
            for opportunity in opportunities
        ]
        # sorted() is stable, so equal scores keep input order.
        return sorted(results, key=lambda item: item.match_score, reverse=True)
