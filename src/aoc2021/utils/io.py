"""
I/O utilities for the Advent of Code 2021 day solvers.

This module centralizes common file and path operations so that:
- Day modules do *not* hard-code paths.
- Personal puzzle inputs under `data/inputs/` take precedence over the
  sample inputs bundled with the package.
- Reading/writing the answers table is consistent across the project.

Typical usage from code or notebooks
------------------------------------

    from aoc2021.utils.io import read_input, available_input_names

    for name in available_input_names(5):
        text = read_input(5, name)

Personal inputs go to `data/inputs/dayNN/input.txt`, e.g.
`data/inputs/day05/input.txt`.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

import datetime as dt
import pandas as pd

from ..config import (
    BUNDLED_INPUTS_DIR,
    DATA_ANSWERS_DIR,
    DATA_DIR,
    DATA_INPUTS_DIR,
    INPUT_SUFFIX,
    PERSONAL_INPUT_NAME,
    day_dirname,
    input_filename,
)


PathLike = Union[str, Path]


# ---------------------------------------------------------------------------
# Directory helpers
# ---------------------------------------------------------------------------

def ensure_data_dirs() -> None:
    """
    Ensure that the main data directories exist:

    - data/
    - data/inputs/
    - data/answers/

    It is safe to call this repeatedly.
    """
    DATA_DIR.mkdir(parents=True, exist_ok=True)
    DATA_INPUTS_DIR.mkdir(parents=True, exist_ok=True)
    DATA_ANSWERS_DIR.mkdir(parents=True, exist_ok=True)


def get_answers_dir() -> Path:
    """
    Return the answers directory path (`data/answers/`), creating it
    if needed.
    """
    DATA_ANSWERS_DIR.mkdir(parents=True, exist_ok=True)
    return DATA_ANSWERS_DIR


def get_timestamped_answers_path(
    prefix: str = "answers",
    suffix: str = ".csv",
) -> Path:
    """
    Build a timestamped answers path under `data/answers/`.

    Example output filename:
        answers_20211225_060000.csv
    """
    get_answers_dir()
    timestamp = dt.datetime.now(dt.timezone.utc).strftime("%Y%m%d_%H%M%S")
    return DATA_ANSWERS_DIR / f"{prefix}_{timestamp}{suffix}"


# ---------------------------------------------------------------------------
# Puzzle inputs
# ---------------------------------------------------------------------------

def get_input_path(day: int, name: str) -> Path:
    """
    Locate the input file called `name` for `day`.

    `data/inputs/dayNN/<name>.txt` is checked first so a personal file can
    shadow a bundled sample of the same name.

    Raises
    ------
    FileNotFoundError
        If the input exists in neither location.
    """
    filename = input_filename(name)
    candidates = [
        DATA_INPUTS_DIR / day_dirname(day) / filename,
        BUNDLED_INPUTS_DIR / day_dirname(day) / filename,
    ]
    for path in candidates:
        if path.exists():
            return path

    raise FileNotFoundError(
        f"Input '{name}' for day {day} not found. Looked in: "
        + ", ".join(str(p) for p in candidates)
        + f". Place your puzzle input at {candidates[0]}."
    )


def read_input(day: int, name: str) -> str:
    """
    Return the raw text of the input called `name` for `day`.
    """
    return get_input_path(day, name).read_text()


def read_input_file(path: PathLike) -> str:
    """
    Return the raw text of an arbitrary input file.
    """
    input_path = Path(path)
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")
    return input_path.read_text()


def available_input_names(day: int) -> List[str]:
    """
    Names of the inputs that can be solved for `day`.

    Bundled samples come first (sorted), followed by the personal input
    when `data/inputs/dayNN/input.txt` exists.
    """
    bundled_dir = BUNDLED_INPUTS_DIR / day_dirname(day)
    names = sorted(p.stem for p in bundled_dir.glob(f"*{INPUT_SUFFIX}"))

    personal = DATA_INPUTS_DIR / day_dirname(day) / input_filename(PERSONAL_INPUT_NAME)
    if personal.exists() and PERSONAL_INPUT_NAME not in names:
        names.append(PERSONAL_INPUT_NAME)
    return names


# ---------------------------------------------------------------------------
# Answers table
# ---------------------------------------------------------------------------

def save_answers_df(
    answers_df: pd.DataFrame,
    path: Optional[PathLike] = None,
    prefix: str = "answers",
) -> Path:
    """
    Save an answers DataFrame to CSV.

    Parameters
    ----------
    answers_df:
        DataFrame with at least columns day, input, challenge_one,
        challenge_two.
    path:
        Optional explicit output path. If None, a timestamped filename is
        created under `data/answers/` via `get_timestamped_answers_path`.
    prefix:
        Filename prefix when generating a timestamped path.

    Returns
    -------
    Path
        The path to the written CSV.
    """
    if path is None:
        out_path = get_timestamped_answers_path(prefix=prefix)
    else:
        out_path = Path(path)
        out_path.parent.mkdir(parents=True, exist_ok=True)

    answers_df.to_csv(out_path, index=False)
    return out_path


def load_answers_csv(path: PathLike) -> pd.DataFrame:
    """
    Load an answers CSV from disk as a DataFrame.

    Answers can exceed the float range that pandas would silently fall back
    to, so the answer columns are read as nullable integers.
    """
    csv_path = Path(path)
    if not csv_path.exists():
        raise FileNotFoundError(f"Answers CSV not found: {csv_path}")
    return pd.read_csv(
        csv_path,
        dtype={"input": str, "challenge_one": "Int64", "challenge_two": "Int64"},
    )


__all__ = [
    "PathLike",
    "ensure_data_dirs",
    "get_answers_dir",
    "get_timestamped_answers_path",
    "get_input_path",
    "read_input",
    "read_input_file",
    "available_input_names",
    "save_answers_df",
    "load_answers_csv",
]
