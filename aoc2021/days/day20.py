"""Day 20: Trench Map."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from scipy import ndimage

from ..config import DEFAULT_PART
from ..errors import ParseError
from ..grid import Array, parse_char_grid
from ..parsing import blocks
from . import check_part

TITLE = "Day 20: Trench Map"
REPORT = {
    1: "The count of lit pixels after 2 enhancements is {}.",
    2: "The count of lit pixels after 50 enhancements is {}.",
}

PIXELS = {".": 0, "#": 1}
ALGORITHM_LENGTH = 512
# Bit weight of every cell in a 3x3 window, read row by row.
WEIGHTS = (2 ** np.arange(8, -1, -1)).reshape(3, 3)


@dataclass
class Scan:
    algorithm: Array
    image: Array


def parse(text: str) -> Scan:
    groups = blocks(text)
    if len(groups) != 2:
        raise ParseError("Expected the enhancement algorithm and the image separated by a blank line")
    algorithm = "".join(groups[0])
    if len(algorithm) != ALGORITHM_LENGTH or set(algorithm) - set(PIXELS):
        raise ParseError(f"Enhancement algorithm must be {ALGORITHM_LENGTH} '#'/'.' characters")
    return Scan(
        algorithm=np.array([PIXELS[ch] for ch in algorithm], dtype=np.int64),
        image=parse_char_grid("\n".join(groups[1]), PIXELS),
    )


def enhance(scan: Scan, times: int) -> int:
    """Apply the algorithm ``times`` times and count the lit pixels.

    The infinite background is uniform; it flips whenever the algorithm maps
    an all-dark window to lit, which the background value tracks.
    """
    image = scan.image
    background = 0
    for _ in range(times):
        image = np.pad(image, 1, constant_values=background)
        index = ndimage.correlate(image, WEIGHTS, mode="constant", cval=background)
        image = scan.algorithm[index]
        background = int(scan.algorithm[0 if background == 0 else ALGORITHM_LENGTH - 1])
    if background:
        raise ParseError("Infinitely many pixels are lit")
    return int(image.sum())


def part_one(scan: Scan) -> int:
    return enhance(scan, 2)


def part_two(scan: Scan) -> int:
    return enhance(scan, 50)


def solve(text: str, part: int = DEFAULT_PART) -> int:
    check_part(part, REPORT)
    scan = parse(text)
    return part_one(scan) if part == 1 else part_two(scan)
