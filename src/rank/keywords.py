"""Fixed keyword vocabularies used by the substring heuristics.

Bump ``KEYWORD_LISTS_VERSION`` whenever a list changes, since scores move with it.
"""

from __future__ import annotations

from src.normalize.schema import EducationLevel

KEYWORD_LISTS_VERSION = "1.0.0"

HIGH_DEMAND_MAJORS: tuple[str, ...] = (
    "computer science",
    "engineering",
    "medicine",
    "nursing",
    "mathematics",
    "physics",
    "chemistry",
    "biology",
)

MODERATE_DEMAND_MAJORS: tuple[str, ...] = (
    "business",
    "economics",
    "accounting",
    "finance",
    "psychology",
    "education",
    "communications",
)

UNDERREPRESENTED_ETHNICITIES: tuple[str, ...] = (
    "african american",
    "black",
    "hispanic",
    "latino",
    "native american",
    "pacific islander",
    "alaska native",
)

GENDER_BONUS_TERMS: tuple[str, ...] = ("female", "woman")

# Each group adds its bonus once when any of its terms appears in the essay.
ESSAY_KEYWORD_GROUPS: tuple[tuple[str, ...], ...] = (
    ("goal", "aspiration"),
    ("challenge", "overcome"),
    ("community", "service"),
    ("leadership", "lead"),
    ("impact", "difference"),
)

# Matched case-sensitively against the raw duration text.
LONG_TERM_DURATION_MARKERS: tuple[str, ...] = ("year", "semester")

EDUCATION_LEVEL_POINTS: dict[EducationLevel, int] = {
    "doctoral": 40,
    "phd": 40,
    "masters": 35,
    "graduate": 35,
    "bachelor": 30,
    "undergraduate": 30,
    "associate": 25,
    "high school": 20,
}
DEFAULT_EDUCATION_LEVEL_POINTS = 15
