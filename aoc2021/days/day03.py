"""Day 3: Binary Diagnostic.

The report is held as a 0/1 matrix with one row per number, so the bit
criteria become column statistics.
"""

from __future__ import annotations

import numpy as np

from ..config import DEFAULT_PART
from ..errors import ParseError
from ..grid import Array, parse_char_grid
from . import check_part

TITLE = "Day 3: Binary Diagnostic"
REPORT = {
    1: "The power consumption of the submarine is {}.",
    2: "The life support rating of the submarine is {}.",
}


def parse(text: str) -> Array:
    return parse_char_grid(text, {"0": 0, "1": 1})


def bits_to_int(bits: Array) -> int:
    return int("".join(str(int(b)) for b in bits), 2)


def most_common_bits(report: Array) -> Array:
    """Most common bit per column; ties count as 1."""
    ones = report.sum(axis=0)
    return (2 * ones >= report.shape[0]).astype(np.int64)


def part_one(report: Array) -> int:
    gamma_bits = most_common_bits(report)
    gamma = bits_to_int(gamma_bits)
    epsilon = bits_to_int(1 - gamma_bits)
    return gamma * epsilon


def _rating(report: Array, keep_most_common: bool) -> int:
    rows = report
    for column in range(report.shape[1]):
        if len(rows) == 1:
            break
        wanted = most_common_bits(rows)[column]
        if not keep_most_common:
            wanted = 1 - wanted
        matching = rows[rows[:, column] == wanted]
        if len(matching):
            rows = matching
    if len(np.unique(rows, axis=0)) != 1:
        raise ParseError(f"Bit criteria left {len(rows)} distinct numbers instead of one")
    return bits_to_int(rows[0])


def part_two(report: Array) -> int:
    oxygen = _rating(report, keep_most_common=True)
    co2 = _rating(report, keep_most_common=False)
    return oxygen * co2


def solve(text: str, part: int = DEFAULT_PART) -> int:
    check_part(part, REPORT)
    report = parse(text)
    return part_one(report) if part == 1 else part_two(report)
