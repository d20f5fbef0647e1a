"""Tests for day 15: Chiton."""

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

import numpy as np

from aoc2021.days import day15

SAMPLE = """\
1163751742
1381373672
2136511328
3694931569
7463417111
1319128137
1359912421
3125421639
1293138521
2311944581
"""


def test_sample():
    assert day15.solve(SAMPLE, 1) == 40
    assert day15.solve(SAMPLE, 2) == 315


def test_expand_wraps_risk():
    full = day15.expand(day15.parse("8\n"))
    assert full.shape == (5, 5)
    assert full[0].tolist() == [8, 9, 1, 2, 3]
    assert full[:, 4].tolist() == [3, 4, 5, 6, 7]


def test_expanded_sample_corner():
    full = day15.expand(day15.parse(SAMPLE))
    assert full.shape == (50, 50)
    assert np.array_equal(full[:10, :10], day15.parse(SAMPLE))
    assert full[-1].tolist()[-10:] == [1, 2, 9, 9, 8, 3, 3, 4, 7, 9]


def test_single_cell():
    assert day15.solve("5\n", 1) == 0
