"""Day 6: Lanternfish.

Fish with the same timer behave identically, so the school is tracked as nine
counters instead of one entry per fish.
"""

from __future__ import annotations

from collections import deque
from typing import List

from ..config import DEFAULT_PART
from ..errors import ParseError
from ..parsing import parse_csv_ints
from . import check_part

TITLE = "Day 6: Lanternfish"
REPORT = {
    1: "After 80 days there are {} lanternfish.",
    2: "After 256 days there are {} lanternfish.",
}

RESET_TIMER = 6
NEWBORN_TIMER = 8


def parse(text: str) -> List[int]:
    timers = parse_csv_ints(text)
    for timer in timers:
        if not 0 <= timer <= NEWBORN_TIMER:
            raise ParseError(f"Lanternfish timer {timer} is out of range 0..{NEWBORN_TIMER}")
    return timers


def simulate(timers: List[int], days: int) -> int:
    """Return the population size after ``days`` days."""
    counts = deque([0] * (NEWBORN_TIMER + 1))
    for timer in timers:
        counts[timer] += 1
    for _ in range(days):
        spawning = counts.popleft()
        counts[RESET_TIMER] += spawning
        counts.append(spawning)
    return sum(counts)


def part_one(timers: List[int]) -> int:
    return simulate(timers, 80)


def part_two(timers: List[int]) -> int:
    return simulate(timers, 256)


def solve(text: str, part: int = DEFAULT_PART) -> int:
    check_part(part, REPORT)
    timers = parse(text)
    return part_one(timers) if part == 1 else part_two(timers)
