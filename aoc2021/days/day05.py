"""Day 5: Hydrothermal Venture."""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from ..config import DEFAULT_PART
from ..parsing import lines, match_line
from . import check_part

TITLE = "Day 5: Hydrothermal Venture"
REPORT = {
    1: "At {} points do at least two horizontal or vertical lines overlap.",
    2: "At {} points do at least two lines overlap.",
}

Line = Tuple[int, int, int, int]


def parse(text: str) -> List[Line]:
    vents = []
    for line in lines(text):
        m = match_line(r"(\d+),(\d+)\s*->\s*(\d+),(\d+)", line, "line of vents")
        vents.append(tuple(int(v) for v in m.groups()))
    return vents


def count_overlaps(vents: List[Line], include_diagonals: bool) -> int:
    """Count grid points covered by at least two lines.

    Only horizontal, vertical and 45 degree lines exist; anything else is
    ignored.
    """
    width = max(max(x1, x2) for x1, _, x2, _ in vents) + 1
    height = max(max(y1, y2) for _, y1, _, y2 in vents) + 1
    covered = np.zeros((height, width), dtype=np.int64)
    for x1, y1, x2, y2 in vents:
        dx, dy = np.sign(x2 - x1), np.sign(y2 - y1)
        length = max(abs(x2 - x1), abs(y2 - y1))
        diagonal = dx != 0 and dy != 0
        if diagonal and (not include_diagonals or abs(x2 - x1) != abs(y2 - y1)):
            continue
        steps = np.arange(length + 1)
        np.add.at(covered, (y1 + dy * steps, x1 + dx * steps), 1)
    return int(np.count_nonzero(covered >= 2))


def part_one(vents: List[Line]) -> int:
    return count_overlaps(vents, include_diagonals=False)


def part_two(vents: List[Line]) -> int:
    return count_overlaps(vents, include_diagonals=True)


def solve(text: str, part: int = DEFAULT_PART) -> int:
    check_part(part, REPORT)
    vents = parse(text)
    return part_one(vents) if part == 1 else part_two(vents)
