"""
High-level answers table for the Advent of Code 2021 day solvers.

Each day module is a standalone program. This module only drives them
from the outside, so that every implemented day can be solved in one go:

- Solve one (day, input) pair with `solve_day`.
- Build an in-memory answers `DataFrame` for many days with
  `build_answers_df`.
- Write it to CSV with `write_answers_csv`, or use the small CLI:

      python -m aoc2021.answers
      python -m aoc2021.answers --days 1 5 9 --output data/answers/mine.csv

Answers written here can be checked with `aoc2021.evaluation`.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from .config import DAYS
from .days import load_day
from .utils.io import available_input_names, read_input, save_answers_df
from .utils.timing import Timer


ANSWER_COLUMNS = ["day", "input", "challenge_one", "challenge_two", "seconds"]


# ---------------------------------------------------------------------------
# Single day
# ---------------------------------------------------------------------------

def solve_day(day: int, name: str) -> Dict[str, Any]:
    """
    Solve both challenges of `day` for the input called `name`.

    The day module is imported by name and used through its public
    `parse_input`, `challenge_one` and `challenge_two` functions; nothing is
    printed.

    Returns
    -------
    dict
        Record with keys day, input, challenge_one, challenge_two, seconds.
    """
    module = load_day(day)
    text = read_input(day, name)

    with Timer(f"day {day} ({name})", quiet=True) as timer:
        data = module.parse_input(text)
        answer_one = module.challenge_one(data)
        answer_two = module.challenge_two(data)

    return {
        "day": day,
        "input": name,
        "challenge_one": int(answer_one),
        "challenge_two": int(answer_two),
        "seconds": timer.elapsed,
    }


# ---------------------------------------------------------------------------
# Answers DataFrame
# ---------------------------------------------------------------------------

def build_answers_df(
    days: Optional[Iterable[int]] = None,
    names: Optional[Iterable[str]] = None,
    verbose: bool = True,
) -> pd.DataFrame:
    """
    Solve many days and collect the answers in a DataFrame.

    Parameters
    ----------
    days:
        Days to solve. Defaults to every implemented day (`config.DAYS`).
    names:
        Input names to solve for each day. Defaults to every available
        input of that day; names a day doesn't have are skipped.
    verbose:
        If True, print one progress line per solved input.

    Returns
    -------
    pd.DataFrame
        One row per (day, input) with columns day, input, challenge_one,
        challenge_two, seconds.
    """
    days = list(DAYS if days is None else days)
    unknown = sorted(set(days) - set(DAYS))
    if unknown:
        raise ValueError(f"Days not implemented: {unknown}")

    wanted = None if names is None else list(names)

    records: List[Dict[str, Any]] = []
    for day in days:
        available = available_input_names(day)
        selected = available if wanted is None else [n for n in wanted if n in available]
        for name in selected:
            record = solve_day(day, name)
            records.append(record)
            if verbose:
                print(
                    f"[answers] day {day:2d} ({name}): "
                    f"{record['challenge_one']}, {record['challenge_two']} "
                    f"in {record['seconds']:.3f} s"
                )

    return pd.DataFrame(records, columns=ANSWER_COLUMNS)


# ---------------------------------------------------------------------------
# Write CSV helper
# ---------------------------------------------------------------------------

def write_answers_csv(
    output_path: Optional[Path] = None,
    days: Optional[Iterable[int]] = None,
    names: Optional[Iterable[str]] = None,
) -> Path:
    """
    Build the answers table and write it to CSV.

    If `output_path` is None, a timestamped name is created under
    `data/answers/`.
    """
    answers_df = build_answers_df(days=days, names=names)
    return save_answers_df(answers_df, path=output_path)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Solve Advent of Code 2021 days and write the answers to CSV.",
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
        help="Only solve inputs with this name (repeatable).",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help=(
            "Optional output path for the CSV. If omitted, a timestamped name "
            "will be created under data/answers/."
        ),
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    output = Path(args.output) if args.output is not None else None

    out_path = write_answers_csv(output_path=output, days=args.days, names=args.names)
    print(f"[answers] Answers written to: {out_path}")


if __name__ == "__main__":
    main()
