from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from src.normalize.schema import (
    Activity,
    ApplicantProfile,
    Demographics,
    Essay,
    FinancialProfile,
    Opportunity,
    Requirement,
)

GOLDEN_EVAL_TODAY = date(2024, 1, 15)

_CS_ESSAY = (
    "My goal is to become a software engineer who creates technology that addresses social inequity. "
    "Growing up in a low-income household, I witnessed firsthand how lack of access to technology can "
    "limit opportunities. This scholarship would allow me to focus on my studies rather than working "
    "multiple jobs to support my family. I plan to use my education to develop applications that provide "
    "educational resources to underserved communities, similar to the work I've been doing as a volunteer. "
    "With this financial support, I can dedicate more time to research and internships that will prepare "
    "me to make a meaningful impact in the tech industry while giving back to my community."
)

_PREMED_ESSAY = (
    "Medicine has always been my passion because it combines scientific knowledge with direct service to "
    "others. Through my volunteer work at the hospital, I have seen how physicians can make a profound "
    "difference in people's lives during their most vulnerable moments. My research experience has taught "
    "me the importance of evidence-based practice and continuous learning. I am particularly interested in "
    "oncology research and hope to contribute to developing better treatments for cancer patients. This "
    "scholarship would help me focus on my pre-medical studies and continue my research work without the "
    "financial stress that currently limits my opportunities."
)

_VETERAN_ESSAY = (
    "My military service taught me discipline, leadership, and the value of teamwork. These skills have "
    "been invaluable as I pursue my business degree while working full-time to support my family. The "
    "military showed me how effective leadership can inspire people to achieve goals they never thought "
    "possible. I want to use my business education to create opportunities for other veterans and "
    "underrepresented communities. My goal is to start a consulting firm that helps small businesses in "
    "underserved areas grow and thrive. This scholarship would allow me to reduce my work hours and focus "
    "more on my studies, giving me the foundation I need to achieve this dream."
)


@dataclass(frozen=True, slots=True)
class GoldenStudent:
    student_id: str
    description: str
    profile: ApplicantProfile


def get_golden_students() -> list[GoldenStudent]:
    return [
        GoldenStudent(
            student_id="student-001",
            description="High-achieving first-generation computer science undergraduate.",
            profile=ApplicantProfile(
                applicant_id="student-001",
                gpa=3.95,
                education_level="undergraduate",
                major="Computer Science",
                demographics=Demographics(
                    ethnicity="Hispanic",
                    gender="Female",
                    first_generation=True,
                ),
                financial_need=FinancialProfile(
                    family_income=35000,
                    dependents=3,
                    assets=2000,
                    expected_family_contribution=500,
                    financial_need=45000,
                ),
                activities=(
                    Activity(
                        type="leadership",
                        title="Computer Science Club President",
                        duration_text="2 years",
                        hours_per_week=8,
                        achievements=("Increased membership by 150%", "Organized 5 major tech conferences"),
                    ),
                    Activity(
                        type="volunteer",
                        title="Code for Good Volunteer",
                        duration_text="3 years",
                        hours_per_week=6,
                        achievements=("Taught 50+ students", "Developed curriculum"),
                    ),
                    Activity(
                        type="work",
                        title="Software Development Intern",
                        duration_text="1 year",
                        hours_per_week=20,
                        achievements=("Developed REST APIs", "Improved system performance by 30%"),
                    ),
                ),
                essays=(
                    Essay(
                        prompt="Describe your career goals and how this scholarship will help",
                        content=_CS_ESSAY,
                        word_count=567,
                        quality_score=88,
                    ),
                ),
            ),
        ),
        GoldenStudent(
            student_id="student-002",
            description="Pre-med biology undergraduate with research experience.",
            profile=ApplicantProfile(
                applicant_id="student-002",
                gpa=3.7,
                education_level="undergraduate",
                major="Biology",
                demographics=Demographics(ethnicity="Asian American", gender="Male"),
                financial_need=FinancialProfile(
                    family_income=75000,
                    dependents=2,
                    assets=25000,
                    expected_family_contribution=15000,
                    financial_need=30000,
                ),
                activities=(
                    Activity(
                        type="volunteer",
                        title="Hospital Volunteer",
                        duration_text="2 years",
                        hours_per_week=4,
                        achievements=("200+ volunteer hours", "Patient care recognition"),
                    ),
                    Activity(
                        type="academic",
                        title="Research Assistant",
                        duration_text="1 year",
                        hours_per_week=10,
                        achievements=("Co-authored research paper", "Presented at conference"),
                    ),
                ),
                essays=(
                    Essay(
                        prompt="Why do you want to pursue medicine?",
                        content=_PREMED_ESSAY,
                        word_count=445,
                        quality_score=75,
                    ),
                ),
            ),
        ),
        GoldenStudent(
            student_id="student-003",
            description="Veteran business undergraduate working full-time with high financial need.",
            profile=ApplicantProfile(
                applicant_id="student-003",
                gpa=3.2,
                education_level="undergraduate",
                major="Business Administration",
                demographics=Demographics(
                    ethnicity="African American",
                    gender="Female",
                    first_generation=True,
                    veteran=True,
                ),
                financial_need=FinancialProfile(
                    family_income=28000,
                    dependents=2,
                    assets=500,
                    expected_family_contribution=0,
                    financial_need=50000,
                ),
                activities=(
                    Activity(
                        type="work",
                        title="Retail Manager",
                        duration_text="3 years",
                        hours_per_week=30,
                        achievements=("Increased sales by 20%", "Employee of the month (3 times)"),
                    ),
                    Activity(
                        type="leadership",
                        title="Student Veterans Association VP",
                        duration_text="1 year",
                        hours_per_week=5,
                        achievements=("Organized support programs", "Increased membership by 50%"),
                    ),
                ),
                essays=(
                    Essay(
                        prompt="How has your military service influenced your educational goals?",
                        content=_VETERAN_ESSAY,
                        word_count=512,
                        quality_score=82,
                    ),
                ),
            ),
        ),
    ]


def get_golden_opportunities() -> list[Opportunity]:
    return [
        Opportunity(
            opportunity_id="scholarship-001",
            title="STEM Excellence Scholarship",
            provider="Technology Education Foundation",
            amount=25000,
            deadline=date(2024, 3, 15),
            requirements=(
                Requirement(type="gpa", value=3.5),
                Requirement(type="major", value="STEM"),
                Requirement(type="essay", value="career goals"),
            ),
            competitiveness="high",
            renewability=True,
        ),
        Opportunity(
            opportunity_id="scholarship-002",
            title="First Generation College Student Award",
            provider="Educational Opportunity Fund",
            amount=15000,
            deadline=date(2024, 4, 1),
            requirements=(
                Requirement(type="demographic", value="first generation"),
                Requirement(type="financial", value=50000),
                Requirement(type="gpa", value=3.0),
            ),
            competitiveness="medium",
            renewability=True,
        ),
        Opportunity(
            opportunity_id="scholarship-003",
            title="Veterans Education Support Grant",
            provider="Veterans Educational Foundation",
            amount=20000,
            deadline=date(2024, 5, 15),
            requirements=(
                Requirement(type="demographic", value="veteran"),
                Requirement(type="gpa", value=2.5),
                Requirement(type="essay", value="military service impact"),
            ),
            competitiveness="low",
            renewability=False,
        ),
        Opportunity(
            opportunity_id="scholarship-004",
            title="Women in Technology Scholarship",
            provider="Women Tech Alliance",
            amount=18000,
            deadline=date(2024, 2, 28),
            requirements=(
                Requirement(type="demographic", value="female"),
                Requirement(type="major", value="technology"),
                Requirement(type="gpa", value=3.2),
            ),
            competitiveness="medium",
            renewability=True,
        ),
        Opportunity(
            opportunity_id="scholarship-005",
            title="Healthcare Heroes Scholarship",
            provider="Medical Education Fund",
            amount=30000,
            deadline=date(2024, 6, 30),
            requirements=(
                Requirement(type="major", value="healthcare"),
                Requirement(type="gpa", value=3.8),
                Requirement(type="recommendation", value="medical professional"),
            ),
            competitiveness="high",
            renewability=True,
        ),
    ]
