"""Day 12: Passage Pathing."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, FrozenSet, Set

from ..config import DEFAULT_PART
from ..errors import ParseError
from ..parsing import lines, match_line
from . import check_part

TITLE = "Day 12: Passage Pathing"
REPORT = {
    1: "There are {} paths through this cave system that visit small caves at most once.",
    2: "There are {} paths through this cave system that visit small caves at most once, but one small one twice.",
}

START = "start"
END = "end"

CaveMap = Dict[str, Set[str]]


def parse(text: str) -> CaveMap:
    caves: CaveMap = defaultdict(set)
    for line in lines(text):
        m = match_line(r"([A-Za-z]+)-([A-Za-z]+)", line, "passage")
        a, b = m.groups()
        if not is_small(a) and not is_small(b):
            raise ParseError(f"Big caves {a} and {b} are connected, giving infinitely many paths")
        caves[a].add(b)
        caves[b].add(a)
    if START not in caves or END not in caves:
        raise ParseError("Cave system needs both a start and an end cave")
    return dict(caves)


def is_small(cave: str) -> bool:
    return cave.islower()


def count_paths(caves: CaveMap, allow_revisit: bool) -> int:
    """Count paths from start to end.

    Small caves may be visited once, except that with ``allow_revisit`` a
    single small cave other than start and end may be visited twice.
    """
    def walk(cave: str, seen: FrozenSet[str], revisit_left: bool) -> int:
        if cave == END:
            return 1
        total = 0
        for nxt in caves[cave]:
            if nxt == START:
                continue
            if not is_small(nxt) or nxt not in seen:
                total += walk(nxt, seen | {nxt} if is_small(nxt) else seen, revisit_left)
            elif revisit_left and nxt != END:
                total += walk(nxt, seen, False)
        return total

    return walk(START, frozenset([START]), allow_revisit)


def part_one(caves: CaveMap) -> int:
    return count_paths(caves, allow_revisit=False)


def part_two(caves: CaveMap) -> int:
    return count_paths(caves, allow_revisit=True)


def solve(text: str, part: int = DEFAULT_PART) -> int:
    check_part(part, REPORT)
    caves = parse(text)
    return part_one(caves) if part == 1 else part_two(caves)
