"""
Command-line plumbing shared by the day modules.

Every day module ends with

    def main(argv=None):
        run_day(DAY, parse_input, challenge_one, challenge_two, argv)

so that `python -m aoc2021.days.dayNN` solves each available input and
prints both answers:

    Challenge one (sample): 7
    Challenge two (sample): 5

Options
-------
--input NAME   Solve only the named input (repeatable), e.g. `--input sample`.
--file PATH    Solve an arbitrary file instead of a named input.
--time         Print how long each input took.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from .io import available_input_names, read_input, read_input_file
from .timing import time_block


Parser = Callable[[str], Any]
Challenge = Callable[[Any], int]


def build_arg_parser(day: int) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=f"Solve both challenges of Advent of Code 2021 day {day}.",
    )
    parser.add_argument(
        "--input",
        dest="names",
        action="append",
        default=None,
        metavar="NAME",
        help="Name of an input to solve (repeatable). Defaults to every available input.",
    )
    parser.add_argument(
        "--file",
        dest="files",
        action="append",
        default=None,
        metavar="PATH",
        help="Path of an input file to solve (repeatable).",
    )
    parser.add_argument(
        "--time",
        action="store_true",
        help="Print the wall-clock time spent on each input.",
    )
    return parser


def process(
    day: int,
    name: str,
    parse: Parser,
    challenge_one: Challenge,
    challenge_two: Challenge,
    text: Optional[str] = None,
) -> Tuple[int, int]:
    """
    Parse one input, print both answers and return them.

    If `text` is None the input called `name` is read with `read_input`.
    """
    if text is None:
        text = read_input(day, name)

    data = parse(text)

    answer_one = challenge_one(data)
    print(f"Challenge one ({name}): {answer_one}")

    answer_two = challenge_two(data)
    print(f"Challenge two ({name}): {answer_two}")

    return answer_one, answer_two


def resolve_inputs(day: int, args: argparse.Namespace) -> List[Tuple[str, Optional[str]]]:
    """
    Turn parsed CLI options into (name, text) pairs.

    Named inputs carry `None` as text so that `process` reads them lazily.
    """
    inputs: List[Tuple[str, Optional[str]]] = []
    for path in args.files or []:
        inputs.append((Path(path).stem, read_input_file(path)))
    for name in args.names or []:
        inputs.append((name, None))

    if not inputs:
        inputs = [(name, None) for name in available_input_names(day)]
    if not inputs:
        raise FileNotFoundError(f"No inputs available for day {day}.")
    return inputs


def run_day(
    day: int,
    parse: Parser,
    challenge_one: Challenge,
    challenge_two: Challenge,
    argv: Optional[List[str]] = None,
) -> Dict[str, Tuple[int, int]]:
    """
    Default `main` body of a day module.

    Returns a mapping of input name to (challenge one, challenge two).
    """
    args = build_arg_parser(day).parse_args(argv)

    results: Dict[str, Tuple[int, int]] = {}
    for name, text in resolve_inputs(day, args):
        with time_block(f"day {day} ({name})", quiet=not args.time):
            results[name] = process(day, name, parse, challenge_one, challenge_two, text=text)
    return results


__all__ = [
    "build_arg_parser",
    "process",
    "resolve_inputs",
    "run_day",
]
