"""Offline evaluation helpers for golden applicant profiles."""

from src.eval.golden_students import (
    GOLDEN_EVAL_TODAY,
    GoldenStudent,
    get_golden_opportunities,
    get_golden_students,
)
from src.eval.parity import run_parity_checks

__all__ = [
    "GOLDEN_EVAL_TODAY",
    "GoldenStudent",
    "get_golden_opportunities",
    "get_golden_students",
    "run_parity_checks",
]
