"""Day 1: Sonar Sweep."""

from __future__ import annotations

import logging
from typing import List

import numpy as np

from ..config import DEFAULT_PART
from ..parsing import parse_int_lines
from . import check_part

logger = logging.getLogger(__name__)

TITLE = "Day 1: Sonar Sweep"
REPORT = {
    1: "Depth measurement increases count is: {}",
    2: "Depth measurement increases (with sliding window of three) count is: {}",
}


def parse(text: str) -> List[int]:
    depths = parse_int_lines(text)
    logger.debug(f"Parsed {len(depths)} depth measurements")
    return depths


def count_increases(depths: List[int], window: int = 1) -> int:
    """Count how often the sum of a sliding window grows.

    Consecutive windows share all but one measurement, so comparing the sums
    reduces to comparing the values ``window`` positions apart.
    """
    a = np.asarray(depths, dtype=np.int64)
    if len(a) <= window:
        return 0
    return int(np.count_nonzero(a[window:] > a[:-window]))


def part_one(depths: List[int]) -> int:
    return count_increases(depths, 1)


def part_two(depths: List[int]) -> int:
    return count_increases(depths, 3)


def solve(text: str, part: int = DEFAULT_PART) -> int:
    """Count depth increases, singly (part 1) or over windows of three (part 2)."""
    check_part(part, REPORT)
    depths = parse(text)
    return part_one(depths) if part == 1 else part_two(depths)
