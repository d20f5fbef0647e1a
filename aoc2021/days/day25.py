"""Day 25: Sea Cucumber."""

from __future__ import annotations

import logging

import numpy as np

from ..grid import Array, parse_char_grid
from . import check_part

logger = logging.getLogger(__name__)

TITLE = "Day 25: Sea Cucumber"
REPORT = {
    1: "The first step on which no sea cucumbers move is {}.",
}

EMPTY, EAST, SOUTH = 0, 1, 2
CELLS = {".": EMPTY, ">": EAST, "v": SOUTH}


def parse(text: str) -> Array:
    return parse_char_grid(text, CELLS)


def _move_herd(floor: Array, herd: int, axis: int) -> bool:
    """Move every member of ``herd`` one cell along ``axis`` if the cell is free."""
    movers = (floor == herd) & (np.roll(floor, -1, axis=axis) == EMPTY)
    if not movers.any():
        return False
    floor[movers] = EMPTY
    floor[np.roll(movers, 1, axis=axis)] = herd
    return True


def step(floor: Array) -> bool:
    """Advance ``floor`` in place by one step; return whether anything moved."""
    moved_east = _move_herd(floor, EAST, axis=1)
    moved_south = _move_herd(floor, SOUTH, axis=0)
    return moved_east or moved_south


def part_one(floor: Array) -> int:
    floor = floor.copy()
    steps = 1
    while step(floor):
        steps += 1
    logger.debug(f"Sea cucumbers settled after {steps} steps")
    return steps


def solve(text: str, part: int = 1) -> int:
    check_part(part, REPORT)
    return part_one(parse(text))
