from __future__ import annotations

from datetime import date

from src.normalize.results import ApplicationEffort
from src.normalize.schema import Opportunity

BASE_HOURS = 5
HOURS_PER_REQUIREMENT = 2
ESSAY_HOURS = 8
LARGE_AWARD_THRESHOLD = 50000
MEDIUM_AWARD_THRESHOLD = 20000

# (max days until deadline, stress level), checked top-down.
DEADLINE_STRESS_BANDS: tuple[tuple[int, int], ...] = ((7, 9), (14, 6), (30, 4))
RELAXED_DEADLINE_STRESS = 2


def days_until_deadline(deadline: date | None, today: date) -> int | None:
    if deadline is None:
        return None
    return max(0, (deadline - today).days)


def deadline_stress_level(days_left: int | None) -> int:
    if days_left is None:
        return RELAXED_DEADLINE_STRESS
    for max_days, stress in DEADLINE_STRESS_BANDS:
        if days_left <= max_days:
            return stress
    return RELAXED_DEADLINE_STRESS


def estimate_application_effort(opportunity: Opportunity, today: date | None = None) -> ApplicationEffort:
    effective_today = today or date.today()

    hours = BASE_HOURS
    if opportunity.amount >= LARGE_AWARD_THRESHOLD:
        hours += 15
        complexity = "high"
    elif opportunity.amount >= MEDIUM_AWARD_THRESHOLD:
        hours += 10
        complexity = "medium"
    else:
        hours += 5
        complexity = "low"

    if opportunity.competitiveness == "high":
        hours += 10
        complexity = "high"

    hours += len(opportunity.requirements) * HOURS_PER_REQUIREMENT

    if opportunity.has_essay_requirement:
        hours += ESSAY_HOURS
        if complexity != "high":
            complexity = "medium"

    stress = deadline_stress_level(days_until_deadline(opportunity.deadline, effective_today))
    required_documents = tuple(
        requirement.type for requirement in opportunity.requirements if requirement.is_required
    )

    return ApplicationEffort(
        estimated_hours=hours,
        complexity=complexity,
        deadline_stress_level=stress,
        required_documents=required_documents,
    )
