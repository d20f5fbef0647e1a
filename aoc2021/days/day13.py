"""Day 13: Transparent Origami."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Set, Tuple

from ..config import DEFAULT_PART
from ..errors import ParseError
from ..grid import render_points
from ..parsing import blocks, match_line
from . import check_part

TITLE = "Day 13: Transparent Origami"
REPORT = {
    1: "There are {} dots visible after completing just the first fold instruction.",
    2: "The fully folded transparent paper looks like:\n\n{}",
}

Dot = Tuple[int, int]
Fold = Tuple[str, int]


@dataclass
class Manual:
    dots: Set[Dot]
    folds: List[Fold]


def parse(text: str) -> Manual:
    groups = blocks(text)
    if len(groups) != 2:
        raise ParseError("Expected dot positions and fold instructions separated by a blank line")
    dots = set()
    for line in groups[0]:
        m = match_line(r"(\d+),(\d+)", line, "position")
        dots.add((int(m.group(1)), int(m.group(2))))
    folds = []
    for line in groups[1]:
        m = match_line(r"fold along ([xy])=(\d+)", line, "fold instruction")
        folds.append((m.group(1), int(m.group(2))))
    return Manual(dots, folds)


def fold(dots: Set[Dot], instruction: Fold) -> Set[Dot]:
    """Reflect every dot beyond the fold line onto the kept half.

    Dots on the fold line itself disappear.
    """
    axis, line = instruction
    folded = set()
    for x, y in dots:
        if (x if axis == "x" else y) == line:
            continue
        if axis == "x" and x > line:
            x = 2 * line - x
        elif axis == "y" and y > line:
            y = 2 * line - y
        folded.add((x, y))
    return folded


def part_one(manual: Manual) -> int:
    if not manual.folds:
        return len(manual.dots)
    return len(fold(manual.dots, manual.folds[0]))


def part_two(manual: Manual) -> str:
    dots = manual.dots
    for instruction in manual.folds:
        dots = fold(dots, instruction)
    return render_points(dots)


def solve(text: str, part: int = DEFAULT_PART):
    check_part(part, REPORT)
    manual = parse(text)
    return part_one(manual) if part == 1 else part_two(manual)
