"""Day 7: The Treachery of Whales."""

from __future__ import annotations

from typing import Callable, List

import numpy as np

from ..config import DEFAULT_PART
from ..grid import Array
from ..parsing import parse_csv_ints
from . import check_part

TITLE = "Day 7: The Treachery of Whales"
REPORT = {
    1: "Aligning the crabs costs at least {} fuel.",
    2: "Aligning the crabs costs at least {} fuel with increasing burn rate.",
}


def parse(text: str) -> List[int]:
    return parse_csv_ints(text)


def linear_cost(distance: Array) -> Array:
    return distance


def triangular_cost(distance: Array) -> Array:
    return distance * (distance + 1) // 2


def least_fuel(positions: List[int], cost: Callable[[Array], Array]) -> int:
    """Try every candidate position between the outermost crabs at once."""
    crabs = np.asarray(positions, dtype=np.int64)
    candidates = np.arange(crabs.min(), crabs.max() + 1)
    distances = np.abs(crabs[None, :] - candidates[:, None])
    return int(cost(distances).sum(axis=1).min())


def part_one(positions: List[int]) -> int:
    return least_fuel(positions, linear_cost)


def part_two(positions: List[int]) -> int:
    return least_fuel(positions, triangular_cost)


def solve(text: str, part: int = DEFAULT_PART) -> int:
    check_part(part, REPORT)
    positions = parse(text)
    return part_one(positions) if part == 1 else part_two(positions)
