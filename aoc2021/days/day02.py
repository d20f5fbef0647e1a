"""Day 2: Dive!"""

from __future__ import annotations

from typing import List, Tuple

from ..config import DEFAULT_PART
from ..parsing import lines, match_line
from . import check_part

TITLE = "Day 2: Dive!"
REPORT = {
    1: "The product of horizontal position and depth is {}.",
    2: "The product of horizontal position and depth (using aim) is {}.",
}

Command = Tuple[str, int]


def parse(text: str) -> List[Command]:
    commands = []
    for line in lines(text):
        m = match_line(r"(forward|down|up) (\d+)", line, "command")
        commands.append((m.group(1), int(m.group(2))))
    return commands


def part_one(commands: List[Command]) -> int:
    horizontal = depth = 0
    for direction, units in commands:
        if direction == "forward":
            horizontal += units
        elif direction == "down":
            depth += units
        else:
            depth -= units
    return horizontal * depth


def part_two(commands: List[Command]) -> int:
    """Down and up only change the aim; forward moves along it."""
    horizontal = depth = aim = 0
    for direction, units in commands:
        if direction == "forward":
            horizontal += units
            depth += aim * units
        elif direction == "down":
            aim += units
        else:
            aim -= units
    return horizontal * depth


def solve(text: str, part: int = DEFAULT_PART) -> int:
    check_part(part, REPORT)
    commands = parse(text)
    return part_one(commands) if part == 1 else part_two(commands)
