"""Day 9: Smoke Basin."""

from __future__ import annotations

import numpy as np
from scipy import ndimage

from ..config import DEFAULT_PART
from ..errors import ParseError
from ..grid import Array, parse_digit_grid
from . import check_part

TITLE = "Day 9: Smoke Basin"
REPORT = {
    1: "The sum of risk levels of lowest points is {}.",
    2: "The product of the sizes of the three largest basins is {}.",
}

RIDGE = 9


def parse(text: str) -> Array:
    return parse_digit_grid(text)


def low_points(heights: Array) -> Array:
    """Boolean mask of cells lower than all four neighbours."""
    padded = np.pad(heights, 1, constant_values=RIDGE + 1)
    centre = padded[1:-1, 1:-1]
    return (
        (centre < padded[:-2, 1:-1])
        & (centre < padded[2:, 1:-1])
        & (centre < padded[1:-1, :-2])
        & (centre < padded[1:-1, 2:])
    )


def part_one(heights: Array) -> int:
    return int((heights[low_points(heights)] + 1).sum())


def part_two(heights: Array) -> int:
    # Basins are the 4-connected regions bounded by height 9.
    labels, _ = ndimage.label(heights != RIDGE)
    sizes = np.bincount(labels.ravel())[1:]
    if len(sizes) < 3:
        raise ParseError(f"Not enough basins found (only {len(sizes)})")
    largest = np.sort(sizes)[-3:]
    return int(np.prod(largest))


def solve(text: str, part: int = DEFAULT_PART) -> int:
    check_part(part, REPORT)
    heights = parse(text)
    return part_one(heights) if part == 1 else part_two(heights)
