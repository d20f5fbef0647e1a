"""Tests for day 11: Dumbo Octopus."""

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

import numpy as np

from aoc2021.days import day11

SAMPLE = """\
5483143223
2745854711
5264556173
6141336146
6357385478
4167524645
2176841721
6882881134
4846848554
5283751526
"""


def test_sample():
    assert day11.solve(SAMPLE, 1) == 1656
    assert day11.solve(SAMPLE, 2) == 195


def test_small_example():
    energy = day11.parse("11111\n19991\n19191\n19991\n11111\n")
    assert day11.step(energy) == 9
    assert np.array_equal(energy, day11.parse("34543\n40004\n50005\n40004\n34543\n"))
    assert day11.step(energy) == 0
    assert np.array_equal(energy, day11.parse("45654\n51115\n61116\n51115\n45654\n"))


def test_parts_do_not_modify_input():
    energy = day11.parse(SAMPLE)
    before = energy.copy()
    day11.part_one(energy)
    assert np.array_equal(energy, before)
