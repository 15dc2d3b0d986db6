"""
Check an answers table against the known answers.

For an answers table with rows of the form

    day,input,challenge_one,challenge_two,seconds
    1,sample,7,5,0.0003
    6,sample,5934,26984457539,0.0002
    ...

we do the following:

1. Look up `(day, input)` in `config.EXPECTED_ANSWERS`.
2. Add the expected answers as `expected_one` / `expected_two`
   (missing when the answer is not known).
3. Add `ok_one` / `ok_two`: True or False when an expectation exists,
   missing otherwise (the check is skipped).

Personal puzzle inputs have no known answers, so their rows are always
skipped.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple, Union

import pandas as pd

from .config import EXPECTED_ANSWERS
from .utils.io import load_answers_csv


# Type alias for clarity
CheckTable = pd.DataFrame

REQUIRED_COLUMNS = {"day", "input", "challenge_one", "challenge_two"}


def _compare(actual, expected: Optional[int]) -> Optional[bool]:
    if expected is None or pd.isna(actual):
        return None
    return int(actual) == expected


def check_answers_df(answers_df: pd.DataFrame) -> CheckTable:
    """
    Join an answers DataFrame with the known answers.

    Parameters
    ----------
    answers_df:
        DataFrame with at least columns day, input, challenge_one,
        challenge_two.

    Returns
    -------
    CheckTable (pd.DataFrame)
        A copy of `answers_df` with extra columns expected_one,
        expected_two (nullable integers) and ok_one, ok_two (nullable
        booleans).
    """
    missing = REQUIRED_COLUMNS.difference(answers_df.columns)
    if missing:
        raise ValueError(f"Answers table is missing required columns: {sorted(missing)}")

    table = answers_df.copy()

    expected_one = []
    expected_two = []
    ok_one = []
    ok_two = []
    for _, row in table.iterrows():
        one, two = EXPECTED_ANSWERS.get((int(row["day"]), str(row["input"])), (None, None))
        expected_one.append(one)
        expected_two.append(two)
        ok_one.append(_compare(row["challenge_one"], one))
        ok_two.append(_compare(row["challenge_two"], two))

    table["expected_one"] = pd.array(expected_one, dtype="Int64")
    table["expected_two"] = pd.array(expected_two, dtype="Int64")
    table["ok_one"] = pd.array(ok_one, dtype="boolean")
    table["ok_two"] = pd.array(ok_two, dtype="boolean")
    return table


def mismatches_of(table: CheckTable) -> CheckTable:
    """
    Rows of a checked table where at least one known answer differs.
    """
    wrong = ~table["ok_one"].fillna(True) | ~table["ok_two"].fillna(True)
    return table[wrong.astype(bool)].reset_index(drop=True)


def evaluate_answers_csv(path: Union[str, Path]) -> Tuple[CheckTable, CheckTable]:
    """
    Load an answers CSV and check it.

    Returns
    -------
    table:
        The checked answers table (see `check_answers_df`).
    mismatches:
        The rows of `table` with a wrong answer.
    """
    answers_df = load_answers_csv(path)
    table = check_answers_df(answers_df)
    return table, mismatches_of(table)


__all__ = [
    "CheckTable",
    "check_answers_df",
    "mismatches_of",
    "evaluate_answers_csv",
]
