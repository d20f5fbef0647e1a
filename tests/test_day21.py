"""Tests for day 21: Dirac Dice."""

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from aoc2021.days import day21
from aoc2021.errors import ParseError

SAMPLE = "Player 1 starting position: 4\nPlayer 2 starting position: 8\n"


def test_sample():
    assert day21.solve(SAMPLE, 1) == 739785
    assert day21.solve(SAMPLE, 2) == 444356092776315


def test_board_wraps():
    assert day21.move(7, 5) == 2
    assert day21.move(10, 10) == 10


def test_dirac_rolls():
    assert sum(day21.DIRAC_ROLLS.values()) == 27
    assert day21.DIRAC_ROLLS[9] == 1 and day21.DIRAC_ROLLS[6] == 7


@pytest.mark.parametrize(
    "text",
    [
        "Player 1 starting position: 4\n",
        "Player 1 starting position: 4\nPlayer 2 starting position: 11\n",
        "Player 2 starting position: 4\nPlayer 1 starting position: 8\n",
    ],
)
def test_malformed_players(text):
    with pytest.raises(ParseError):
        day21.parse(text)
