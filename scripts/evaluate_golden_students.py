from __future__ import annotations

import argparse
import logging
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from src.decision.facade import DecisionFacade, DecisionReport
from src.eval.golden_students import (
    GOLDEN_EVAL_TODAY,
    GoldenStudent,
    get_golden_opportunities,
    get_golden_students,
)
from src.eval.parity import run_parity_checks
from src.io.json_io import load_scoring_weights, write_json_atomic
from src.normalize.numeric import format_currency, format_percentage
from src.rank.weights import ScoringWeights

logger = logging.getLogger("evaluate_golden_students")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Offline evaluation against golden applicant profiles.")
    parser.add_argument(
        "--reports-dir",
        type=Path,
        default=ROOT_DIR / "reports",
        help="Output directory for markdown and JSON artifacts.",
    )
    parser.add_argument(
        "--weights",
        type=Path,
        default=None,
        help="Optional JSON file with scoring_weights overrides.",
    )
    return parser.parse_args(argv)


def _resolve_path(path: Path) -> Path:
    return path if path.is_absolute() else ROOT_DIR / path


def evaluate_students(
    facade: DecisionFacade,
    students: list[GoldenStudent],
) -> dict[str, DecisionReport]:
    opportunities = get_golden_opportunities()
    return {student.student_id: facade.evaluate(student.profile, opportunities) for student in students}


def _markdown_report(
    *,
    generated_at: str,
    weights: ScoringWeights,
    weights_path: Path | None,
    students: list[GoldenStudent],
    reports: dict[str, DecisionReport],
    parity: dict[str, Any],
) -> str:
    lines: list[str] = []
    lines.append("# Golden Applicant Evaluation")
    lines.append("")
    lines.append(f"- Generated at (UTC): {generated_at}")
    lines.append(f"- Evaluation date: {GOLDEN_EVAL_TODAY.isoformat()}")
    lines.append(f"- Golden profiles: {len(students)}")
    if weights_path is None:
        lines.append("- Weights: baseline defaults")
    else:
        lines.append(f"- Weights file: `{weights_path}`")
    lines.append(
        "- Active weights: " + ", ".join(f"{name}={value:.2f}" for name, value in weights.to_dict().items())
    )
    lines.append("")
    lines.append("## Parity Checks")
    lines.append("")
    for result in parity["results"]:
        status = "PASS" if result["passed"] else "FAIL"
        lines.append(f"- {status} {result['test']}: {result['details']}")
    lines.append("")
    lines.append("## Per-Profile Results")

    for student in students:
        report = reports[student.student_id]
        portfolio = report.portfolio
        lines.append("")
        lines.append(f"### {student.student_id}")
        lines.append("")
        lines.append(student.description)
        lines.append("")
        lines.append(f"- Total score: {report.score.total_score:.2f}")
        lines.append(f"- Percentile: {report.score.percentile:.0f}")
        lines.append(f"- Potential award: {format_currency(portfolio.total_potential_award)}")
        lines.append(f"- Effort: {portfolio.total_estimated_effort_hours}h of {portfolio.max_effort_hours:.1f}h")
        lines.append(f"- Portfolio ROI: {format_percentage(portfolio.portfolio_roi, 2)}")
        lines.append("")
        lines.append("| Rank | Opportunity | Match | Hours | ROI | Win % | Risk | Selected |")
        lines.append("|---:|---|---:|---:|---:|---:|---|---|")
        frame = report.to_frame()
        for rank, (_, row) in enumerate(frame.iterrows(), start=1):
            lines.append(
                f"| {rank} | {row['title']} | {row['match_score']:.2f} | {row['estimated_hours']} | "
                f"{row['roi']:.2f} | {row['win_probability']:.2f} | {row['risk_level']} | "
                f"{'yes' if row['selected'] else 'no'} |"
            )

    lines.append("")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    weights_path = _resolve_path(args.weights) if args.weights is not None else None
    weights = load_scoring_weights(weights_path) if weights_path is not None else ScoringWeights.baseline()
    facade = DecisionFacade.from_config(weights=weights, today=GOLDEN_EVAL_TODAY)
    students = get_golden_students()

    reports = evaluate_students(facade, students)
    parity = run_parity_checks(facade.scoring_engine, [student.profile for student in students])
    if not parity["passed"]:
        logger.warning("Parity checks failed: %s", [item["test"] for item in parity["results"] if not item["passed"]])

    timestamp = datetime.now(tz=UTC).strftime("%Y%m%d_%H%M%S")
    generated_at = datetime.now(tz=UTC).strftime("%Y-%m-%dT%H:%M:%SZ")
    reports_dir = args.reports_dir if args.reports_dir.is_absolute() else ROOT_DIR / args.reports_dir
    markdown_path = reports_dir / f"golden_eval_{timestamp}.md"
    json_path = reports_dir / "artifacts" / f"golden_eval_{timestamp}.json"

    markdown_path.parent.mkdir(parents=True, exist_ok=True)
    markdown_path.write_text(
        _markdown_report(
            generated_at=generated_at,
            weights=weights,
            weights_path=weights_path,
            students=students,
            reports=reports,
            parity=parity,
        ),
        encoding="utf-8",
    )
    write_json_atomic(
        {
            "generated_at": generated_at,
            "evaluation_date": GOLDEN_EVAL_TODAY.isoformat(),
            "weights": weights.to_dict(),
            "weights_path": str(weights_path) if weights_path is not None else None,
            "parity": parity,
            "per_profile": {student_id: report.to_dict() for student_id, report in reports.items()},
        },
        json_path,
    )

    print(f"Wrote markdown report: {markdown_path}")
    print(f"Wrote JSON artifact: {json_path}")
    return 0 if parity["passed"] else 1


if __name__ == "__main__":
    raise SystemExit(main())
