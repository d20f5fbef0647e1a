"""Day 15: Chiton."""

from __future__ import annotations

import heapq
import logging

import numpy as np

from ..config import DEFAULT_PART
from ..grid import Array, in_bounds, neighbors4, parse_digit_grid
from . import check_part

logger = logging.getLogger(__name__)

TITLE = "Day 15: Chiton"
REPORT = {
    1: "The lowest total risk of any path is {}.",
    2: "The lowest total risk of any path through the full map is {}.",
}

TILES = 5


def parse(text: str) -> Array:
    return parse_digit_grid(text)


def expand(risk: Array, tiles: int = TILES) -> Array:
    """Tile the map ``tiles`` times each way; each tile step adds one, wrapping 9 to 1."""
    h, w = risk.shape
    offsets = np.add.outer(np.arange(tiles), np.arange(tiles))
    full = np.kron(offsets, np.ones((h, w), dtype=risk.dtype)) + np.tile(risk, (tiles, tiles))
    return (full - 1) % 9 + 1


def lowest_total_risk(risk: Array) -> int:
    """Dijkstra from the top-left to the bottom-right corner.

    The starting cell is never entered, so its risk does not count.
    """
    h, w = risk.shape
    target = (h - 1, w - 1)
    best = np.full(risk.shape, np.iinfo(np.int64).max, dtype=np.int64)
    best[0, 0] = 0
    queue = [(0, 0, 0)]
    while queue:
        total, y, x = heapq.heappop(queue)
        if (y, x) == target:
            return total
        if total > best[y, x]:
            continue
        for ny, nx in neighbors4(y, x):
            if not in_bounds(risk, ny, nx):
                continue
            candidate = total + int(risk[ny, nx])
            if candidate < best[ny, nx]:
                best[ny, nx] = candidate
                heapq.heappush(queue, (candidate, ny, nx))
    return int(best[target])


def part_one(risk: Array) -> int:
    return lowest_total_risk(risk)


def part_two(risk: Array) -> int:
    full = expand(risk)
    logger.debug(f"Expanded map from {risk.shape} to {full.shape}")
    return lowest_total_risk(full)


def solve(text: str, part: int = DEFAULT_PART) -> int:
    check_part(part, REPORT)
    risk = parse(text)
    return part_one(risk) if part == 1 else part_two(risk)
