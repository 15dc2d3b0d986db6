"""
Day 3: Binary Diagnostic

The diagnostic report is a list of equally wide binary numbers, parsed into
a 2D numpy array of 0/1 values (one row per number, most significant bit
first).

- Challenge one builds the gamma rate from the most common bit of every
  column and the epsilon rate from the least common one. When a column is
  tied, the bit goes to epsilon.
- Challenge two filters rows column by column. The oxygen generator rating
  keeps the most common bit (1 on ties), the CO2 scrubber rating keeps the
  least common bit (0 on ties).
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from ..utils.cli import run_day

DAY = 3


def parse_input(text: str) -> np.ndarray:
    lines = text.strip().splitlines()
    if not lines:
        raise ValueError("diagnostic report is empty")

    width = len(lines[0])
    rows: List[List[int]] = []
    for line in lines:
        if len(line) != width:
            raise ValueError(f"expected {width} bits, got {len(line)}: {line!r}")
        bad = set(line) - {"0", "1"}
        if bad:
            raise ValueError(f"invalid char {sorted(bad)[0]!r} in {line!r}")
        rows.append([int(c) for c in line])
    return np.array(rows, dtype=np.uint8)


def bits_to_int(bits) -> int:
    value = 0
    for bit in bits:
        value = (value << 1) | int(bit)
    return value


def gamma_epsilon(report: np.ndarray) -> tuple:
    ones = report.sum(axis=0)
    zeros = report.shape[0] - ones
    gamma_bits = (ones > zeros).astype(np.uint8)
    epsilon_bits = 1 - gamma_bits
    return bits_to_int(gamma_bits), bits_to_int(epsilon_bits)


def _rating(report: np.ndarray, most_common: bool) -> int:
    rows = report
    for col in range(report.shape[1]):
        if len(rows) == 1:
            break
        ones = int(rows[:, col].sum())
        zeros = len(rows) - ones
        # Every remaining row shares this bit, so nothing is filtered out.
        if ones == 0 or zeros == 0:
            continue
        if most_common:
            keep = 1 if ones >= zeros else 0
        else:
            keep = 1 if ones < zeros else 0
        rows = rows[rows[:, col] == keep]

    # Any rows left after the last column are identical.
    return bits_to_int(rows[0])


def oxygen_rating(report: np.ndarray) -> int:
    return _rating(report, most_common=True)


def co2_rating(report: np.ndarray) -> int:
    return _rating(report, most_common=False)


def challenge_one(report: np.ndarray) -> int:
    gamma, epsilon = gamma_epsilon(report)
    return gamma * epsilon


def challenge_two(report: np.ndarray) -> int:
    return oxygen_rating(report) * co2_rating(report)


def main(argv: Optional[List[str]] = None) -> None:
    run_day(DAY, parse_input, challenge_one, challenge_two, argv)


if __name__ == "__main__":
    main()
