"""
Utility helpers for the Advent of Code 2021 day solvers.

This package is intended for small, reusable helpers that don't naturally
belong to a single day, for example:

- Locating and reading puzzle inputs
- The shared command-line plumbing of the day modules
- Timing helpers
- Plotting the grids some puzzles produce

Keeping them here avoids cluttering the day modules and keeps imports tidy.
"""

__all__ = []
