#!/usr/bin/env python
"""
CLI helper to solve every implemented day and save the answers CSV.

This script is a thin wrapper around the library entry points:

- aoc2021.answers.write_answers_csv
- aoc2021.evaluation.evaluate_answers_csv  (optional)

Typical usage from the project root
-----------------------------------

    python scripts/solve_all.py
    # or
    python scripts/solve_all.py --days 1 2 3
    python scripts/solve_all.py --input sample
    python scripts/solve_all.py --output data/answers/my_answers.csv
    python scripts/solve_all.py --evaluate

The script automatically adds `src/` to PYTHONPATH so that it can import the
`aoc2021` package without requiring installation.
"""

from __future__ import annotations

import argparse
from pathlib import Path
import sys
from typing import Optional, List


def _ensure_src_on_path() -> Path:
    """
    Ensure that <project_root>/src is on sys.path and return project_root.

    Assumes this file lives in <project_root>/scripts/solve_all.py.
    """
    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))
    return project_root


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Solve the Advent of Code 2021 days and write an answers CSV.",
    )
    parser.add_argument(
        "--days",
        type=int,
        nargs="+",
        default=None,
        help="Days to solve (default: all implemented days).",
    )
    parser.add_argument(
        "--input",
        dest="names",
        action="append",
        default=None,
        metavar="NAME",
        help="Only solve inputs with this name, e.g. 'sample' or 'input' (repeatable).",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help=(
            "Optional output path for the CSV. "
            "If omitted, a timestamped name will be created under data/answers/."
        ),
    )
    parser.add_argument(
        "--evaluate",
        action="store_true",
        help="After writing the answers, check them against the known answers.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    project_root = _ensure_src_on_path()

    # Imports done after path configuration
    from aoc2021.answers import write_answers_csv
    from aoc2021.evaluation import evaluate_answers_csv

    args = _parse_args(argv)

    output_path = Path(args.output) if args.output is not None else None

    print(f"[solve_all] Project root: {project_root}")
    if args.days is not None:
        print(f"[solve_all] Days: {' '.join(str(d) for d in args.days)}")

    csv_path = write_answers_csv(output_path=output_path, days=args.days, names=args.names)
    print(f"[solve_all] Answers written to: {csv_path}")

    if not args.evaluate:
        return 0

    print("[solve_all] Checking answers...")
    table, mismatches = evaluate_answers_csv(csv_path)
    checked = int(table["ok_one"].notna().sum() + table["ok_two"].notna().sum())
    print(f"[solve_all] Checked {checked} answers, {len(mismatches)} row(s) wrong.")
    for _, row in mismatches.iterrows():
        print(
            f"[solve_all] day {row['day']} ({row['input']}): "
            f"got {row['challenge_one']}, {row['challenge_two']}; "
            f"expected {row['expected_one']}, {row['expected_two']}"
        )
    return 1 if len(mismatches) else 0


if __name__ == "__main__":
    sys.exit(main())
