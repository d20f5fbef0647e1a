"""Tests for day 13: Transparent Origami."""

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from aoc2021.days import day13
from aoc2021.errors import ParseError

SAMPLE = """\
6,10
0,14
9,10
0,3
10,4
4,11
6,0
6,12
4,1
0,13
10,12
3,4
3,0
8,4
1,10
2,14
8,10
9,0

fold along y=7
fold along x=5
"""


def test_sample():
    assert day13.solve(SAMPLE, 1) == 17
    assert day13.solve(SAMPLE, 2) == "#####\n#...#\n#...#\n#...#\n#####"


def test_fold():
    assert day13.fold({(0, 14), (3, 2)}, ("y", 7)) == {(0, 0), (3, 2)}
    assert day13.fold({(10, 4)}, ("x", 5)) == {(0, 4)}


def test_missing_folds():
    with pytest.raises(ParseError):
        day13.parse("6,10\n0,14\n")


def test_bad_fold():
    with pytest.raises(ParseError):
        day13.parse("6,10\n\nfold along z=3\n")


def test_dots_on_fold_line_disappear():
    assert day13.fold({(5, 0), (0, 0)}, ("x", 5)) == {(0, 0)}
    assert day13.solve("5,0\n0,0\n\nfold along x=5\n", 1) == 1
    assert day13.solve("0,3\n1,1\n\nfold along y=3\n", 1) == 1
