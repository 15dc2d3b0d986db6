"""
Day 12: Passage Pathing

The cave system is an undirected graph given as `a-b` edges. Caves with
upper-case names are big and can be visited any number of times; small
caves can be visited once, except that challenge two allows a single
small cave to be visited twice. `start` and `end` are never revisited.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterator, List, Optional, Set, Tuple

from ..utils.cli import run_day

DAY = 12

START = "start"
END = "end"

CaveGraph = Dict[str, Set[str]]


def parse_input(text: str) -> CaveGraph:
    graph: CaveGraph = defaultdict(set)
    for line in text.strip().splitlines():
        parts = line.strip().split("-")
        if len(parts) != 2 or not all(parts):
            raise ValueError(f"malformed edge ({line})")
        a, b = parts
        graph[a].add(b)
        graph[b].add(a)
    if START not in graph or END not in graph:
        raise ValueError(f"cave system needs both '{START}' and '{END}'")
    return dict(graph)


def is_big(cave: str) -> bool:
    return cave.isupper()


def find_paths(
    graph: CaveGraph,
    allow_revisit: bool = False,
    start: str = START,
    end: str = END,
) -> Iterator[Tuple[str, ...]]:
    """
    Yield every path from `start` to `end` as a tuple of cave names.

    With `allow_revisit`, one small cave other than `start`/`end` may appear
    twice in a path.
    """
    stack: List[Tuple[Tuple[str, ...], bool]] = [((start,), allow_revisit)]
    while stack:
        path, can_revisit = stack.pop()
        cave = path[-1]
        if cave == end:
            yield path
            continue
        for nxt in sorted(graph.get(cave, ())):
            if nxt == start:
                continue
            if is_big(nxt) or nxt not in path:
                stack.append((path + (nxt,), can_revisit))
            elif can_revisit and nxt != end:
                stack.append((path + (nxt,), False))


def count_paths(graph: CaveGraph, allow_revisit: bool = False) -> int:
    return sum(1 for _ in find_paths(graph, allow_revisit))


def challenge_one(graph: CaveGraph) -> int:
    return count_paths(graph)


def challenge_two(graph: CaveGraph) -> int:
    return count_paths(graph, allow_revisit=True)


def main(argv: Optional[List[str]] = None) -> None:
    run_day(DAY, parse_input, challenge_one, challenge_two, argv)


if __name__ == "__main__":
    main()
