"""Day 11: Dumbo Octopus."""

from __future__ import annotations

from itertools import count

import numpy as np
from scipy import ndimage

from ..config import DEFAULT_PART
from ..grid import Array, parse_digit_grid
from . import check_part

TITLE = "Day 11: Dumbo Octopus"
REPORT = {
    1: "There were {} total flashes after 100 steps.",
    2: "All octopuses flash simultaneously during step {}.",
}

FLASH_THRESHOLD = 9
NEIGHBOURS = np.array([[1, 1, 1], [1, 0, 1], [1, 1, 1]])


def parse(text: str) -> Array:
    return parse_digit_grid(text)


def step(energy: Array) -> int:
    """Advance ``energy`` by one step in place and return the flash count."""
    energy += 1
    flashed = np.zeros_like(energy, dtype=bool)
    while True:
        new = (energy > FLASH_THRESHOLD) & ~flashed
        if not new.any():
            break
        flashed |= new
        energy += ndimage.convolve(new.astype(energy.dtype), NEIGHBOURS, mode="constant", cval=0)
    energy[flashed] = 0
    return int(flashed.sum())


def part_one(energy: Array) -> int:
    energy = energy.copy()
    return sum(step(energy) for _ in range(100))


def part_two(energy: Array) -> int:
    energy = energy.copy()
    for n in count(1):
        if step(energy) == energy.size:
            return n


def solve(text: str, part: int = DEFAULT_PART) -> int:
    check_part(part, REPORT)
    energy = parse(text)
    return part_one(energy) if part == 1 else part_two(energy)
