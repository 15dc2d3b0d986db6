"""
Advent of Code 2021 – day solvers

Each puzzle day lives in its own module under `aoc2021.days` and can be run
on its own:

    python -m aoc2021.days.day05

See the `utils` subpackage for input loading, CLI and plotting helpers and
`aoc2021.answers` for collecting every answer into one table.
"""

__all__ = []

__version__ = "0.1.0"
