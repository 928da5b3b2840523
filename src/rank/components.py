"""Raw (unweighted) 0-100 component scorers for an applicant profile."""

from __future__ import annotations

from typing import Iterable

from src.normalize.numeric import clamp, js_round
from src.normalize.schema import Activity, ActivityType, ApplicantProfile, Demographics, Essay, FinancialProfile
from src.rank.keywords import (
    DEFAULT_EDUCATION_LEVEL_POINTS,
    EDUCATION_LEVEL_POINTS,
    ESSAY_KEYWORD_GROUPS,
    GENDER_BONUS_TERMS,
    HIGH_DEMAND_MAJORS,
    LONG_TERM_DURATION_MARKERS,
    MODERATE_DEMAND_MAJORS,
    UNDERREPRESENTED_ETHNICITIES,
)

NO_ACTIVITIES_SCORE = 20.0
NO_ESSAYS_SCORE = 30.0

GPA_STEPS: tuple[tuple[float, float], ...] = (
    (4.0, 100.0),
    (3.8, 95.0),
    (3.5, 85.0),
    (3.2, 75.0),
    (3.0, 65.0),
    (2.8, 55.0),
    (2.5, 45.0),
    (2.0, 35.0),
)

# (hours multiplier, cap) per activity type.
ACTIVITY_HOUR_RULES: dict[ActivityType, tuple[float, float]] = {
    "leadership": (2.0, 15.0),
    "volunteer": (1.5, 10.0),
    "work": (1.2, 12.0),
    "academic": (1.0, 8.0),
    "sports": (0.8, 8.0),
    "arts": (0.8, 6.0),
}

# (minimum score, percentile), checked top-down.
PERCENTILE_TABLE: tuple[tuple[float, float], ...] = (
    (90.0, 95.0),
    (85.0, 90.0),
    (80.0, 85.0),
    (75.0, 80.0),
    (70.0, 75.0),
    (65.0, 65.0),
    (60.0, 55.0),
    (55.0, 45.0),
    (50.0, 35.0),
    (45.0, 25.0),
    (40.0, 15.0),
)


def _contains_any(text: str, terms: Iterable[str]) -> bool:
    return any(term in text for term in terms)


def gpa_score(gpa: float) -> float:
    for threshold, score in GPA_STEPS:
        if gpa >= threshold:
            return score
    return max(0.0, (gpa / 2.0) * 35.0)


def _academic_standing_bonus(gpa: float) -> float:
    if gpa >= 3.8:
        return 25.0
    if gpa >= 3.5:
        return 20.0
    if gpa >= 3.2:
        return 15.0
    if gpa >= 3.0:
        return 10.0
    return 0.0


def _major_demand_bonus(major: str) -> float:
    major_lower = major.lower()
    if _contains_any(major_lower, HIGH_DEMAND_MAJORS):
        return 35.0
    if _contains_any(major_lower, MODERATE_DEMAND_MAJORS):
        return 25.0
    return 15.0


def education_score(profile: ApplicantProfile) -> float:
    level = profile.education_level.strip().lower().replace("_", " ")
    score = float(EDUCATION_LEVEL_POINTS.get(level, DEFAULT_EDUCATION_LEVEL_POINTS))
    score += _major_demand_bonus(profile.major)
    score += _academic_standing_bonus(profile.gpa)
    return min(100.0, score)


def demographics_score(demographics: Demographics) -> float:
    score = 50.0
    if demographics.first_generation:
        score += 20.0
    if demographics.disability:
        score += 15.0
    if demographics.veteran:
        score += 20.0
    if demographics.ethnicity and _contains_any(demographics.ethnicity.lower(), UNDERREPRESENTED_ETHNICITIES):
        score += 15.0
    if demographics.gender and _contains_any(demographics.gender.lower(), GENDER_BONUS_TERMS):
        score += 10.0
    return min(100.0, score)


def _efc_ratio_points(ratio: float) -> float:
    if ratio <= 0.1:
        return 40.0
    if ratio <= 0.2:
        return 35.0
    if ratio <= 0.3:
        return 30.0
    if ratio <= 0.4:
        return 25.0
    if ratio <= 0.5:
        return 20.0
    return 10.0


def _income_bracket_points(family_income: float) -> float:
    if family_income <= 30000:
        return 35.0
    if family_income <= 50000:
        return 30.0
    if family_income <= 75000:
        return 25.0
    if family_income <= 100000:
        return 20.0
    if family_income <= 150000:
        return 15.0
    return 5.0


def financial_score(financial: FinancialProfile) -> float:
    income_floor = max(1.0, financial.family_income)
    score = _efc_ratio_points(financial.expected_family_contribution / income_floor)
    score += _income_bracket_points(financial.family_income)
    score += min(15.0, financial.dependents * 3.0)

    assets_ratio = financial.assets / income_floor
    if assets_ratio > 2.0:
        score -= 10.0
    elif assets_ratio > 1.0:
        score -= 5.0

    return clamp(score)


def _activity_type_bonus(distinct_types: int) -> float:
    if distinct_types >= 4:
        return 15.0
    if distinct_types >= 3:
        return 10.0
    if distinct_types >= 2:
        return 5.0
    return 0.0


def activities_score(activities: tuple[Activity, ...]) -> float:
    if not activities:
        return NO_ACTIVITIES_SCORE

    score = 0.0
    leadership_count = 0
    for activity in activities:
        hours = activity.hours_per_week or 0.0
        rule = ACTIVITY_HOUR_RULES.get(activity.type)
        if rule is not None:
            multiplier, cap = rule
            score += min(cap, hours * multiplier)
        if activity.type == "leadership":
            leadership_count += 1
        score += len(activity.achievements) * 2.0

    score += _activity_type_bonus(len({activity.type for activity in activities}))

    if leadership_count >= 2:
        score += 20.0
    elif leadership_count >= 1:
        score += 10.0

    long_term = [
        activity
        for activity in activities
        if _contains_any(activity.duration_text, LONG_TERM_DURATION_MARKERS)
    ]
    score += len(long_term) * 3.0

    return min(100.0, score)


def _word_count_adjustment(word_count: int) -> float:
    if 500 <= word_count <= 650:
        return 20.0
    if 400 <= word_count <= 800:
        return 15.0
    if 300 <= word_count <= 900:
        return 10.0
    if word_count < 200 or word_count > 1000:
        return -10.0
    return 0.0


def single_essay_score(essay: Essay) -> float:
    score = 50.0 + _word_count_adjustment(essay.word_count or 0)

    if essay.quality_score is not None:
        score += essay.quality_score * 0.3

    if essay.content:
        content = essay.content.lower()
        for group in ESSAY_KEYWORD_GROUPS:
            if _contains_any(content, group):
                score += 5.0
        if len(essay.content) < 1000:
            score -= 5.0
        if len(essay.content.split(".")) < 5:
            score -= 5.0

    return clamp(score)


def essays_score(essays: tuple[Essay, ...]) -> float:
    if not essays:
        return NO_ESSAYS_SCORE

    total = sum(single_essay_score(essay) for essay in essays)
    if len(essays) >= 3:
        total *= 1.1
    elif len(essays) >= 2:
        total *= 1.05

    return min(100.0, total / len(essays))


def percentile_for_score(total_score: float) -> float:
    for threshold, percentile in PERCENTILE_TABLE:
        if total_score >= threshold:
            return percentile
    return max(5.0, js_round((total_score / 40.0) * 15.0))
