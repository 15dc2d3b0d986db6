"""
Test package for the Advent of Code 2021 day solvers.

This directory collects unit and integration tests for:

- The individual days, against the examples from the puzzle texts
  (`test_dayNN.py`)
- The bundled sample inputs and their known answers (`test_samples.py`)
- Input lookup, the day CLI and timing helpers (`test_io.py`, `test_cli.py`)
- The answers table and its checks (`test_answers.py`, `test_evaluation.py`)
- Plot helpers (`test_plotting.py`)
- Personal puzzle inputs, when present (`test_integration.py`)

You can run tests with:

    pytest
    # or
    python -m pytest

from the project root.
"""

__all__ = []
