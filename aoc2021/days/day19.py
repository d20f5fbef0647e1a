"""Day 19: Beacon Scanner."""

from __future__ import annotations

import logging
from collections import deque
from itertools import combinations, permutations, product
from typing import Dict, List, Optional, Tuple

import numpy as np

from ..config import DEFAULT_PART
from ..errors import ParseError
from ..grid import Array
from ..parsing import blocks, match_line
from . import check_part

logger = logging.getLogger(__name__)

TITLE = "Day 19: Beacon Scanner"
REPORT = {
    1: "There are {} beacons.",
    2: "The largest Manhattan distance between any two scanners is {}.",
}

MIN_OVERLAP = 12


def _rotations() -> List[Array]:
    """The 24 proper rotations of 3D space as signed permutation matrices."""
    result = []
    for perm in permutations(range(3)):
        for signs in product((1, -1), repeat=3):
            m = np.zeros((3, 3), dtype=np.int64)
            for row, (col, sign) in enumerate(zip(perm, signs)):
                m[row, col] = sign
            if round(np.linalg.det(m)) == 1:
                result.append(m)
    return result


ROTATIONS = _rotations()


def parse(text: str) -> List[Array]:
    scanners = []
    for group in blocks(text):
        match_line(r"--- scanner \d+ ---", group[0], "scanner header")
        beacons = []
        for line in group[1:]:
            m = match_line(r"(-?\d+),(-?\d+),(-?\d+)", line, "beacon position")
            beacons.append([int(v) for v in m.groups()])
        if not beacons:
            raise ParseError(f'Scanner "{group[0].strip()}" reports no beacons')
        scanners.append(np.asarray(beacons, dtype=np.int64))
    return scanners


def align(known: Array, beacons: Array) -> Optional[Tuple[Array, Array]]:
    """Find a rotation and offset placing at least 12 ``beacons`` onto ``known``.

    Returns the transformed beacons and the scanner position, both in the
    frame of ``known``, or None if the scanners do not overlap.
    """
    for rotation in ROTATIONS:
        rotated = beacons @ rotation.T
        offsets = (known[:, None, :] - rotated[None, :, :]).reshape(-1, 3)
        candidates, counts = np.unique(offsets, axis=0, return_counts=True)
        best = int(np.argmax(counts))
        if counts[best] >= MIN_OVERLAP:
            offset = candidates[best]
            return rotated + offset, offset
    return None


def locate(scanners: List[Array]) -> Tuple[List[Array], List[Array]]:
    """Place every scanner in the frame of scanner 0.

    Returns the beacons and the position of each scanner in that frame.
    """
    placed: Dict[int, Tuple[Array, Array]] = {0: (scanners[0], np.zeros(3, dtype=np.int64))}
    queue = deque([0])
    while queue:
        anchor = queue.popleft()
        for idx, beacons in enumerate(scanners):
            if idx in placed:
                continue
            result = align(placed[anchor][0], beacons)
            if result is not None:
                placed[idx] = result
                queue.append(idx)
                logger.debug(f"Scanner {idx} aligned via scanner {anchor} at {result[1].tolist()}")
    if len(placed) != len(scanners):
        missing = sorted(set(range(len(scanners))) - set(placed))
        raise ParseError(f"Scanners {missing} do not overlap with the others")
    ordered = [placed[idx] for idx in range(len(scanners))]
    return [beacons for beacons, _ in ordered], [position for _, position in ordered]


def part_one(scanners: List[Array]) -> int:
    beacons, _ = locate(scanners)
    return len(np.unique(np.vstack(beacons), axis=0))


def part_two(scanners: List[Array]) -> int:
    _, positions = locate(scanners)
    if len(positions) < 2:
        return 0
    return max(int(np.abs(a - b).sum()) for a, b in combinations(positions, 2))


def solve(text: str, part: int = DEFAULT_PART) -> int:
    check_part(part, REPORT)
    scanners = parse(text)
    return part_one(scanners) if part == 1 else part_two(scanners)
