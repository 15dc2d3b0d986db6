"""
Tests for the answers table (aoc2021.answers).
"""

from __future__ import annotations

import pytest

from aoc2021 import answers
from aoc2021.answers import ANSWER_COLUMNS, build_answers_df, solve_day, write_answers_csv
from aoc2021.utils.io import load_answers_csv


def test_solve_day_record():
    record = solve_day(1, "sample")
    assert set(record) == set(ANSWER_COLUMNS)
    assert (record["day"], record["input"]) == (1, "sample")
    assert (record["challenge_one"], record["challenge_two"]) == (7, 5)
    assert record["seconds"] >= 0.0


def test_solve_day_prints_nothing(capsys):
    solve_day(2, "sample")
    assert capsys.readouterr().out == ""


def test_build_answers_df(capsys):
    df = build_answers_df(days=[1, 12], names=["sample", "sample-2"])
    assert list(df.columns) == ANSWER_COLUMNS
    assert df[["day", "input"]].values.tolist() == [[1, "sample"], [12, "sample-2"]]
    assert df["challenge_two"].tolist() == [5, 103]

    out = capsys.readouterr().out
    assert "[answers] day  1 (sample): 7, 5" in out


def test_build_answers_df_quiet(capsys):
    build_answers_df(days=[6], names=["sample"], verbose=False)
    assert capsys.readouterr().out == ""


def test_build_answers_df_rejects_unknown_days():
    with pytest.raises(ValueError, match="not implemented"):
        build_answers_df(days=[23])


def test_build_answers_df_without_matching_names_is_empty():
    df = build_answers_df(days=[1], names=["nothing-called-this"], verbose=False)
    assert df.empty
    assert list(df.columns) == ANSWER_COLUMNS


def test_write_answers_csv(tmp_path, capsys):
    path = write_answers_csv(output_path=tmp_path / "answers.csv", days=[6, 14], names=["sample"])
    loaded = load_answers_csv(path)
    assert loaded["challenge_two"].tolist() == [26984457539, 2188189693529]


def test_main_writes_csv(tmp_path, capsys):
    output = tmp_path / "out" / "answers.csv"
    answers.main(["--days", "3", "--input", "sample", "--output", str(output)])
    assert output.exists()
    assert f"[answers] Answers written to: {output}" in capsys.readouterr().out
