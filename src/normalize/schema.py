from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Literal, Mapping, cast, get_args

from src.normalize.parsing import (
    as_list,
    as_text_list,
    coerce_bool,
    coerce_date,
    coerce_float,
    coerce_int,
    coerce_optional_float,
    normalize_text,
    pick,
)

ActivityType = Literal["leadership", "volunteer", "work", "academic", "sports", "arts"]
Competitiveness = Literal["low", "medium", "high"]
RequirementType = Literal["gpa", "major", "demographic", "financial", "essay", "recommendation"]
EducationLevel = Literal[
    "doctoral",
    "phd",
    "masters",
    "graduate",
    "bachelor",
    "undergraduate",
    "associate",
    "high school",
]

COMPETITIVENESS_LEVELS: tuple[str, ...] = get_args(Competitiveness)
DEFAULT_COMPETITIVENESS: Competitiveness = "medium"


def _lower_code(value: Any) -> str:
    return normalize_text(value).lower()


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


@dataclass(frozen=True, slots=True)
class Activity:
    type: ActivityType
    hours_per_week: float = 0.0
    duration_text: str = ""
    achievements: tuple[str, ...] = ()
    title: str = ""

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> Activity:
        return cls(
            type=cast(ActivityType, _lower_code(pick(payload, "type"))),
            hours_per_week=coerce_float(pick(payload, "hours_per_week", "hoursPerWeek")),
            duration_text=normalize_text(pick(payload, "duration_text", "durationText", "duration")),
            achievements=tuple(as_text_list(pick(payload, "achievements"))),
            title=normalize_text(pick(payload, "title")),
        )


@dataclass(frozen=True, slots=True)
class Essay:
    word_count: int = 0
    content: str = ""
    quality_score: float | None = None
    prompt: str = ""

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> Essay:
        content = pick(payload, "content", default="")
        return cls(
            word_count=coerce_int(pick(payload, "word_count", "wordCount")),
            content=content if isinstance(content, str) else str(content),
            quality_score=coerce_optional_float(pick(payload, "quality_score", "qualityScore")),
            prompt=normalize_text(pick(payload, "prompt")),
        )


@dataclass(frozen=True, slots=True)
class Demographics:
    ethnicity: str = ""
    gender: str = ""
    first_generation: bool = False
    disability: bool = False
    veteran: bool = False

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any] | None) -> Demographics:
        values = _mapping(payload)
        return cls(
            ethnicity=normalize_text(pick(values, "ethnicity")),
            gender=normalize_text(pick(values, "gender")),
            first_generation=coerce_bool(pick(values, "first_generation", "firstGeneration", default=False)),
            disability=coerce_bool(pick(values, "disability", default=False)),
            veteran=coerce_bool(pick(values, "veteran", default=False)),
        )


@dataclass(frozen=True, slots=True)
class FinancialProfile:
    family_income: float = 0.0
    dependents: int = 0
    assets: float = 0.0
    expected_family_contribution: float = 0.0
    financial_need: float = 0.0

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any] | None) -> FinancialProfile:
        values = _mapping(payload)
        return cls(
            family_income=coerce_float(pick(values, "family_income", "familyIncome")),
            dependents=coerce_int(pick(values, "dependents")),
            assets=coerce_float(pick(values, "assets")),
            expected_family_contribution=coerce_float(
                pick(values, "expected_family_contribution", "expectedFamilyContribution")
            ),
            financial_need=coerce_float(pick(values, "financial_need", "financialNeed")),
        )


@dataclass(frozen=True, slots=True)
class ApplicantProfile:
    """Everything the engines know about one applicant."""

    gpa: float = 0.0
    education_level: str = ""
    major: str = ""
    demographics: Demographics = field(default_factory=Demographics)
    financial_need: FinancialProfile = field(default_factory=FinancialProfile)
    activities: tuple[Activity, ...] = ()
    essays: tuple[Essay, ...] = ()
    applicant_id: str | None = None

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> ApplicantProfile:
        applicant_id = pick(payload, "applicant_id", "id")
        return cls(
            gpa=coerce_float(pick(payload, "gpa")),
            education_level=normalize_text(pick(payload, "education_level", "educationLevel")),
            major=normalize_text(pick(payload, "major")),
            demographics=Demographics.from_mapping(pick(payload, "demographics")),
            financial_need=FinancialProfile.from_mapping(pick(payload, "financial_need", "financialNeed")),
            activities=tuple(
                Activity.from_mapping(item)
                for item in as_list(pick(payload, "activities"))
                if isinstance(item, Mapping)
            ),
            essays=tuple(
                Essay.from_mapping(item)
                for item in as_list(pick(payload, "essays"))
                if isinstance(item, Mapping)
            ),
            applicant_id=str(applicant_id) if applicant_id is not None else None,
        )


@dataclass(frozen=True, slots=True)
class Requirement:
    type: RequirementType
    value: Any = None
    is_required: bool = True

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> Requirement:
        return cls(
            type=cast(RequirementType, _lower_code(pick(payload, "type"))),
            value=pick(payload, "value"),
            is_required=coerce_bool(pick(payload, "is_required", "isRequired", default=True)),
        )


@dataclass(frozen=True, slots=True)
class Opportunity:
    """A funding award with eligibility requirements and a deadline."""

    amount: float
    deadline: date | None = None
    competitiveness: Competitiveness = DEFAULT_COMPETITIVENESS
    renewability: bool = False
    requirements: tuple[Requirement, ...] = ()
    opportunity_id: str | None = None
    title: str = ""
    provider: str = ""

    @property
    def has_essay_requirement(self) -> bool:
        return any(requirement.type == "essay" for requirement in self.requirements)

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> Opportunity:
        competitiveness = _lower_code(pick(payload, "competitiveness"))
        if competitiveness not in COMPETITIVENESS_LEVELS:
            competitiveness = DEFAULT_COMPETITIVENESS
        opportunity_id = pick(payload, "opportunity_id", "id")
        return cls(
            amount=coerce_float(pick(payload, "amount")),
            deadline=coerce_date(pick(payload, "deadline")),
            competitiveness=cast(Competitiveness, competitiveness),
            renewability=coerce_bool(pick(payload, "renewability", "renewable", default=False)),
            requirements=tuple(
                Requirement.from_mapping(item)
                for item in as_list(pick(payload, "requirements"))
                if isinstance(item, Mapping)
            ),
            opportunity_id=str(opportunity_id) if opportunity_id is not None else None,
            title=normalize_text(pick(payload, "title")),
            provider=normalize_text(pick(payload, "provider", "sponsor")),
        )
