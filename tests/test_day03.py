"""Tests for day 3: Binary Diagnostic."""

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

import numpy as np
import pytest

from aoc2021.days import day03
from aoc2021.errors import ParseError

SAMPLE = """\
00100
11110
10110
10111
10101
01111
00111
11100
10000
11001
00010
01010
"""


def test_sample():
    assert day03.solve(SAMPLE, 1) == 198
    assert day03.solve(SAMPLE, 2) == 230


def test_ties_count_as_ones():
    report = day03.parse("10\n01\n")
    assert np.array_equal(day03.most_common_bits(report), [1, 1])


def test_bits_to_int():
    assert day03.bits_to_int(np.array([1, 0, 1, 1, 0])) == 22


@pytest.mark.parametrize("text", ["0102\n1100\n", "101\n10\n"])
def test_malformed_report(text):
    with pytest.raises(ParseError):
        day03.parse(text)
