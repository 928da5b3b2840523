from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date, datetime
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from src.decision.facade import DecisionFacade
from src.io.json_io import jsonable, load_applicant, load_opportunities, load_scoring_weights, write_json_atomic

logger = logging.getLogger("evaluate_applicant")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Score one applicant and select an application portfolio.")
    parser.add_argument("--profile", type=Path, required=True, help="Applicant profile JSON file.")
    parser.add_argument("--opportunities", type=Path, required=True, help="JSON list of opportunities.")
    parser.add_argument(
        "--weights",
        type=Path,
        default=None,
        help="Optional JSON file with scoring_weights overrides.",
    )
    parser.add_argument(
        "--today",
        type=str,
        default=None,
        help="Evaluation date in YYYY-MM-DD format. Defaults to the current date.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the JSON report here instead of printing it.",
    )
    return parser.parse_args(argv)


def _resolve_path(path: Path) -> Path:
    return path if path.is_absolute() else ROOT_DIR / path


def _coerce_today(value: str | None) -> date | None:
    if value is None:
        return None
    return datetime.strptime(value, "%Y-%m-%d").date()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    profile = load_applicant(_resolve_path(args.profile))
    opportunities = load_opportunities(_resolve_path(args.opportunities))
    weights = load_scoring_weights(_resolve_path(args.weights)) if args.weights is not None else None
    facade = DecisionFacade.from_config(
        weights=weights,
        today=_coerce_today(args.today),
    )
    logger.info("Evaluating %d opportunities for applicant %s", len(opportunities), profile.applicant_id)

    payload = facade.evaluate(profile, opportunities).to_dict()
    if args.output is not None:
        output_path = _resolve_path(args.output)
        write_json_atomic(payload, output_path)
        print(f"Wrote JSON report: {output_path}")
    else:
        print(json.dumps(jsonable(payload), indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
