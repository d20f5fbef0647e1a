"""Tests for day 9: Smoke Basin."""

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from aoc2021.days import day09
from aoc2021.errors import ParseError

SAMPLE = "2199943210\n3987894921\n9856789892\n8767896789\n9899965678\n"


def test_sample():
    assert day09.solve(SAMPLE, 1) == 15
    assert day09.solve(SAMPLE, 2) == 1134


def test_low_points():
    heights = day09.parse(SAMPLE)
    assert sorted(heights[day09.low_points(heights)].tolist()) == [0, 1, 5, 5]


def test_not_a_heightmap():
    with pytest.raises(ParseError):
        day09.parse("219\n3x8\n")


@pytest.mark.parametrize("text", ["191\n", "1919\n"])
def test_fewer_than_three_basins(text):
    with pytest.raises(ParseError, match="Not enough basins"):
        day09.solve(text, 2)
