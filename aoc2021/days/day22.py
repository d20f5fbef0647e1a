"""Day 22: Reactor Reboot.

Cuboids are counted with signed volumes: every step cancels its overlap with
each cuboid already counted, then adds itself if it turns cubes on.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..config import DEFAULT_PART
from ..errors import ParseError
from ..parsing import lines, match_line
from . import check_part

TITLE = "Day 22: Reactor Reboot"
REPORT = {
    1: "The count of on cubes in the initialization region after reboot steps is {}.",
    2: "The count of on cubes after reboot steps is {}.",
}

INIT_REGION = 50

# (x_min, x_max, y_min, y_max, z_min, z_max), bounds inclusive
Cuboid = Tuple[int, int, int, int, int, int]


@dataclass(frozen=True)
class Step:
    on: bool
    cuboid: Cuboid


def parse(text: str) -> List[Step]:
    steps = []
    pattern = r"(on|off) x=(-?\d+)\.\.(-?\d+),y=(-?\d+)\.\.(-?\d+),z=(-?\d+)\.\.(-?\d+)"
    for line in lines(text):
        m = match_line(pattern, line, "reboot step")
        bounds = [int(v) for v in m.groups()[1:]]
        if bounds[0] > bounds[1] or bounds[2] > bounds[3] or bounds[4] > bounds[5]:
            raise ParseError(f'Reboot step "{line.strip()}" has an empty range')
        steps.append(Step(m.group(1) == "on", tuple(bounds)))
    return steps


def intersect(a: Cuboid, b: Cuboid) -> Optional[Cuboid]:
    lo = [max(a[i], b[i]) for i in (0, 2, 4)]
    hi = [min(a[i], b[i]) for i in (1, 3, 5)]
    if any(l > h for l, h in zip(lo, hi)):
        return None
    return (lo[0], hi[0], lo[1], hi[1], lo[2], hi[2])


def volume(c: Cuboid) -> int:
    return (c[1] - c[0] + 1) * (c[3] - c[2] + 1) * (c[5] - c[4] + 1)


def count_on(steps: List[Step], region: Optional[Cuboid] = None) -> int:
    """Count the cubes left on, optionally only inside ``region``."""
    signed: Counter = Counter()
    for step in steps:
        cuboid = step.cuboid if region is None else intersect(step.cuboid, region)
        if cuboid is None:
            continue
        update: Counter = Counter()
        for existing, sign in signed.items():
            overlap = intersect(cuboid, existing)
            if overlap is not None:
                update[overlap] -= sign
        if step.on:
            update[cuboid] += 1
        signed.update(update)
        signed = Counter({c: s for c, s in signed.items() if s})
    return sum(volume(c) * sign for c, sign in signed.items())


def part_one(steps: List[Step]) -> int:
    r = INIT_REGION
    return count_on(steps, (-r, r, -r, r, -r, r))


def part_two(steps: List[Step]) -> int:
    return count_on(steps)


def solve(text: str, part: int = DEFAULT_PART) -> int:
    check_part(part, REPORT)
    steps = parse(text)
    return part_one(steps) if part == 1 else part_two(steps)
