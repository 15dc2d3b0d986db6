"""
Tests for checking answers against the known answers (aoc2021.evaluation).
"""

from __future__ import annotations

import pandas as pd
import pytest

from aoc2021.evaluation import check_answers_df, evaluate_answers_csv, mismatches_of
from aoc2021.utils.io import save_answers_df


def _answers_df():
    return pd.DataFrame(
        {
            "day": [1, 1, 1, 16],
            "input": ["sample", "sample", "input", "sample-2"],
            "challenge_one": [7, 8, 1234, 14],
            "challenge_two": [5, 5, 5678, 3],
        }
    )


def test_check_answers_df_adds_expectations():
    table = check_answers_df(_answers_df())

    assert table["expected_one"].tolist()[:2] == [7, 7]
    assert table["expected_two"].tolist()[:2] == [5, 5]
    assert pd.isna(table.loc[2, "expected_one"])

    assert bool(table.loc[0, "ok_one"]) is True
    assert bool(table.loc[1, "ok_one"]) is False
    assert bool(table.loc[1, "ok_two"]) is True


def test_unknown_answers_are_skipped():
    table = check_answers_df(_answers_df())
    assert pd.isna(table.loc[2, "ok_one"])
    assert pd.isna(table.loc[2, "ok_two"])


def test_check_answers_df_does_not_modify_input():
    df = _answers_df()
    check_answers_df(df)
    assert "ok_one" not in df.columns


def test_check_answers_df_requires_columns():
    with pytest.raises(ValueError, match="missing required columns"):
        check_answers_df(pd.DataFrame({"day": [1], "input": ["sample"]}))


def test_mismatches_of():
    mismatches = mismatches_of(check_answers_df(_answers_df()))
    assert len(mismatches) == 1
    assert mismatches.loc[0, "challenge_one"] == 8


def test_evaluate_answers_csv(tmp_path):
    path = save_answers_df(_answers_df(), path=tmp_path / "answers.csv")
    table, mismatches = evaluate_answers_csv(path)
    assert len(table) == 4
    assert len(mismatches) == 1
    assert mismatches.loc[0, "input"] == "sample"
