"""
Global configuration for the Advent of Code 2021 day solvers.

This module centralizes:

- Project-root and data paths
- Where puzzle inputs are looked up (personal inputs vs. bundled samples)
- Puzzle constants used by the individual day modules
- Known answers for the bundled sample inputs

All of these are kept in one place so that the day modules stay short and
changing a step count or a path doesn't require hunting through
multiple files.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Tuple


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

# This file lives in: <repo>/src/aoc2021/config.py
# Project root is therefore two levels up from here.
PROJECT_ROOT: Path = Path(__file__).resolve().parents[2]

DATA_DIR: Path = PROJECT_ROOT / "data"
DATA_INPUTS_DIR: Path = DATA_DIR / "inputs"    # personal puzzle inputs, not committed
DATA_ANSWERS_DIR: Path = DATA_DIR / "answers"

# Sample inputs copied from the puzzle texts ship inside the package.
BUNDLED_INPUTS_DIR: Path = Path(__file__).resolve().parent / "inputs"

INPUT_SUFFIX: str = ".txt"

# Name of the personal puzzle input inside a day directory.
PERSONAL_INPUT_NAME: str = "input"


def day_dirname(day: int) -> str:
    """
    Directory name holding the inputs for `day`, e.g. 'day05'.
    """
    return f"day{day:02d}"


def input_filename(name: str) -> str:
    """
    File name for the input called `name`, e.g. 'sample' -> 'sample.txt'.
    """
    return f"{name}{INPUT_SUFFIX}"


# ---------------------------------------------------------------------------
# Implemented days
# ---------------------------------------------------------------------------

# Day modules are named aoc2021.days.dayNN for every NN listed here.
DAYS: Tuple[int, ...] = tuple(range(1, 19))


# ---------------------------------------------------------------------------
# Puzzle constants
# ---------------------------------------------------------------------------

# Day 1: width of the sliding window in challenge two.
SONAR_WINDOW: int = 3

# Day 6: timer of a fish that just spawned, and the value it resets to.
LANTERNFISH_NEW_TIMER: int = 8
LANTERNFISH_RESET_TIMER: int = 6
LANTERNFISH_DAYS_ONE: int = 80
LANTERNFISH_DAYS_TWO: int = 256

# Day 11: energy above this level flashes.
OCTOPUS_FLASH_LEVEL: int = 9
OCTOPUS_STEPS: int = 100
# Challenge two gives up after this many steps instead of looping forever.
OCTOPUS_MAX_STEPS: int = 10_000

# Day 14: number of insertion steps for each challenge.
POLYMER_STEPS_ONE: int = 10
POLYMER_STEPS_TWO: int = 40

# Day 15: the full cave map is the input tiled this many times per axis.
CHITON_TILE_FACTOR: int = 5

# Day 18: pairs nested this deep explode, numbers this large split.
SNAILFISH_EXPLODE_DEPTH: int = 4
SNAILFISH_SPLIT_THRESHOLD: int = 10


# ---------------------------------------------------------------------------
# Known answers
# ---------------------------------------------------------------------------

# (day, input name) -> (challenge one, challenge two); None means unknown.
ExpectedAnswer = Tuple[Optional[int], Optional[int]]

EXPECTED_ANSWERS: Dict[Tuple[int, str], ExpectedAnswer] = {
    (1, "sample"): (7, 5),
    (2, "sample"): (150, 900),
    (3, "sample"): (198, 230),
    (4, "sample"): (4512, 1924),
    (5, "sample"): (5, 12),
    (6, "sample"): (5934, 26984457539),
    (7, "sample"): (37, 168),
    (8, "sample"): (26, 61229),
    (9, "sample"): (15, 1134),
    (10, "sample"): (26397, 288957),
    (11, "sample"): (1656, 195),
    (12, "sample-1"): (10, 36),
    (12, "sample-2"): (19, 103),
    (12, "sample-3"): (226, 3509),
    (13, "sample"): (17, 16),
    (14, "sample"): (1588, 2188189693529),
    (15, "sample"): (40, 315),
    (16, "sample-1"): (16, 15),
    (16, "sample-2"): (14, 3),
    (17, "sample"): (45, 112),
    (18, "sample"): (4140, 3993),
}


__all__ = [
    # Paths
    "PROJECT_ROOT",
    "DATA_DIR",
    "DATA_INPUTS_DIR",
    "DATA_ANSWERS_DIR",
    "BUNDLED_INPUTS_DIR",
    "INPUT_SUFFIX",
    "PERSONAL_INPUT_NAME",
    "day_dirname",
    "input_filename",
    # Days
    "DAYS",
    # Puzzle constants
    "SONAR_WINDOW",
    "LANTERNFISH_NEW_TIMER",
    "LANTERNFISH_RESET_TIMER",
    "LANTERNFISH_DAYS_ONE",
    "LANTERNFISH_DAYS_TWO",
    "OCTOPUS_FLASH_LEVEL",
    "OCTOPUS_STEPS",
    "OCTOPUS_MAX_STEPS",
    "POLYMER_STEPS_ONE",
    "POLYMER_STEPS_TWO",
    "CHITON_TILE_FACTOR",
    "SNAILFISH_EXPLODE_DEPTH",
    "SNAILFISH_SPLIT_THRESHOLD",
    # Known answers
    "ExpectedAnswer",
    "EXPECTED_ANSWERS",
]
