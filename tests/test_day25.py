"""Tests for day 25: Sea Cucumber."""

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from aoc2021.days import day25
from aoc2021.errors import ParseError, UsageError

SAMPLE = """\
v...>>.vv>
.vv>>.vv..
>>.>v>...v
>>v>>.>.v.
v>v.vv.v..
>.>>..v...
.vv..>.>v.
v.v..>>v.v
....v..v.>
"""


def test_sample():
    assert day25.solve(SAMPLE, 1) == 58


def test_herds_move_in_turn():
    floor = day25.parse("...>...\n.......\n......>\nv.....>\n......>\n.......\n..vvv..\n")
    assert day25.step(floor)
    expected = day25.parse("..vv>..\n.......\n>......\nv.....>\n>......\n.......\n....v..\n")
    assert (floor == expected).all()


def test_wraps_around():
    floor = day25.parse("...>>>>>...\n")
    day25.step(floor)
    day25.step(floor)
    assert (floor == day25.parse("...>>>.>.>.\n")).all()


def test_only_one_part():
    with pytest.raises(UsageError):
        day25.solve(SAMPLE, 2)


def test_unknown_cell():
    with pytest.raises(ParseError):
        day25.parse("v..x\n")


def test_default_part():
    assert day25.solve(SAMPLE) == 58
