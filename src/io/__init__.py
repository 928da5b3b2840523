"""JSON input and report output helpers for scripts."""

from src.io.json_io import (
    jsonable,
    load_applicant,
    load_opportunities,
    load_scoring_weights,
    read_json,
    write_json_atomic,
)

__all__ = [
    "jsonable",
    "load_applicant",
    "load_opportunities",
    "load_scoring_weights",
    "read_json",
    "write_json_atomic",
]
