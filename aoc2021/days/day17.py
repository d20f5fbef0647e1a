"""Day 17: Trick Shot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from ..config import DEFAULT_PART
from ..errors import ParseError
from ..parsing import lines, match_line
from . import check_part

TITLE = "Day 17: Trick Shot"
REPORT = {
    1: "The highest y position possible is {}.",
    2: "There are {} distinct initial velocity values causing the probe to be within the target area after any step.",
}


@dataclass(frozen=True)
class Target:
    x_min: int
    x_max: int
    y_min: int
    y_max: int

    def contains(self, x: int, y: int) -> bool:
        return self.x_min <= x <= self.x_max and self.y_min <= y <= self.y_max


def parse(text: str) -> Target:
    rows = lines(text)
    if len(rows) != 1:
        raise ParseError(f"Expected a single target area line, got {len(rows)} lines")
    m = match_line(
        r"target area: x=(-?\d+)\.\.(-?\d+), y=(-?\d+)\.\.(-?\d+)", rows[0], "target area"
    )
    x1, x2, y1, y2 = (int(v) for v in m.groups())
    target = Target(min(x1, x2), max(x1, x2), min(y1, y2), max(y1, y2))
    if target.x_min <= 0 or target.y_max >= 0:
        raise ParseError("Target area must lie to the right of and below the launcher")
    return target


def peak_if_hit(target: Target, vx: int, vy: int) -> Optional[int]:
    """Simulate a shot and return its highest y if it ever lands in the target."""
    x = y = peak = 0
    while x <= target.x_max and y >= target.y_min:
        x += vx
        y += vy
        peak = max(peak, y)
        vx -= (vx > 0)
        vy -= 1
        if target.contains(x, y):
            return peak
    return None


def hits(target: Target) -> Iterator[int]:
    """Yield the peak height of every initial velocity that hits the target.

    Faster x velocities overshoot in the first step; upward shots return to
    y=0 with speed ``-vy - 1``, so ``vy`` beyond ``-y_min`` overshoots too.
    """
    for vx in range(1, target.x_max + 1):
        for vy in range(target.y_min, -target.y_min):
            peak = peak_if_hit(target, vx, vy)
            if peak is not None:
                yield peak


def part_one(target: Target) -> int:
    return max(hits(target))


def part_two(target: Target) -> int:
    return sum(1 for _ in hits(target))


def solve(text: str, part: int = DEFAULT_PART) -> int:
    check_part(part, REPORT)
    target = parse(text)
    return part_one(target) if part == 1 else part_two(target)
