"""Tests for day 23: Amphipod."""

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from aoc2021.days import day23
from aoc2021.errors import ParseError

SAMPLE = """\
#############
#...........#
###B#C#B#D###
  #A#D#C#A#
  #########
"""


def test_part_one():
    assert day23.solve(SAMPLE, 1) == 12521


@pytest.mark.slow
def test_part_two():
    assert day23.solve(SAMPLE, 2) == 44169


def test_rooms():
    burrow = day23.parse(SAMPLE)
    assert burrow.rooms() == (("B", "A"), ("C", "D"), ("B", "C"), ("D", "A"))
    assert burrow.rooms(unfold=True)[0] == ("B", "D", "D", "A")


def test_already_organized():
    text = SAMPLE.replace("B#C#B#D", "A#B#C#D").replace("A#D#C#A", "A#B#C#D")
    assert day23.solve(text, 1) == 0


def test_one_move_away():
    text = SAMPLE.replace("B#C#B#D", "B#A#C#D").replace("A#D#C#A", "A#B#C#D")
    # A steps aside (4), B crosses home (4 x 10), A settles (2).
    assert day23.solve(text, 1) == 46


@pytest.mark.parametrize(
    "old, new",
    [("B#C#B#D", "B#C#B#E"), ("B#C#B#D", "B#C#B#B"), ("A#D#C#A", "A#D#C")],
)
def test_malformed_burrows(old, new):
    with pytest.raises(ParseError):
        day23.parse(SAMPLE.replace(old, new))
