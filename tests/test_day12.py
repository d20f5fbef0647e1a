"""Tests for day 12: Passage Pathing."""

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from aoc2021.days import day12
from aoc2021.errors import ParseError

SMALL = "start-A\nstart-b\nA-c\nA-b\nb-d\nA-end\nb-end\n"
MEDIUM = "dc-end\nHN-start\nstart-kj\ndc-start\ndc-HN\nLN-dc\nHN-end\nkj-sa\nkj-HN\nkj-dc\n"
LARGE = """\
fs-end
he-DX
fs-he
start-DX
pj-DX
end-zg
zg-sl
zg-pj
pj-he
RW-he
fs-DX
pj-RW
zg-RW
start-pj
he-WI
zg-he
pj-fs
start-RW
"""


@pytest.mark.parametrize(
    "text, once, twice",
    [(SMALL, 10, 36), (MEDIUM, 19, 103), (LARGE, 226, 3509)],
)
def test_samples(text, once, twice):
    assert day12.solve(text, 1) == once
    assert day12.solve(text, 2) == twice


def test_connected_big_caves():
    with pytest.raises(ParseError, match="infinitely"):
        day12.parse(SMALL + "A-B\n")


def test_missing_end():
    with pytest.raises(ParseError):
        day12.parse("start-A\nA-b\n")


def test_malformed_passage():
    with pytest.raises(ParseError):
        day12.parse("start--end\n")
