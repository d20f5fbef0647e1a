"""Tests for day 22: Reactor Reboot."""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

import numpy as np
import pytest
from hypothesis import given, settings, strategies as st

from aoc2021.days import day22
from aoc2021.errors import ParseError

TINY = """\
on x=10..12,y=10..12,z=10..12
on x=11..13,y=11..13,z=11..13
off x=9..11,y=9..11,z=9..11
on x=10..10,y=10..10,z=10..10
"""

LARGER = (Path(__file__).parent / "data" / "day22-sample").read_text()


def test_tiny_example():
    assert day22.solve(TINY, 1) == 39
    assert day22.solve(TINY, 2) == 39


def test_initialization_region():
    assert day22.solve(LARGER, 1) == 590784


def test_steps_outside_region_are_ignored():
    assert day22.solve("on x=60..70,y=0..0,z=0..0\n", 1) == 0
    assert day22.solve("on x=40..70,y=0..0,z=0..0\n", 1) == 11
    assert day22.solve("on x=40..70,y=0..0,z=0..0\n", 2) == 31


@pytest.mark.parametrize(
    "text",
    ["on x=1..0,y=0..0,z=0..0", "toggle x=0..1,y=0..1,z=0..1", "on x=0..1,y=0..1"],
)
def test_malformed_steps(text):
    with pytest.raises(ParseError):
        day22.parse(text)


bounds = st.tuples(st.integers(-4, 4), st.integers(0, 3)).map(lambda t: (t[0], t[0] + t[1]))
steps = st.builds(
    lambda on, x, y, z: day22.Step(on, x + y + z), st.booleans(), bounds, bounds, bounds
)


def voxel_count(reboot):
    cubes = np.zeros((12, 12, 12), dtype=bool)
    for step in reboot:
        x0, x1, y0, y1, z0, z1 = (v + 4 for v in step.cuboid)
        cubes[x0 : x1 + 1, y0 : y1 + 1, z0 : z1 + 1] = step.on
    return int(cubes.sum())


@settings(max_examples=50)
@given(st.lists(steps, max_size=8))
def test_signed_volumes_match_voxels(reboot):
    assert day22.part_two(reboot) == voxel_count(reboot)
