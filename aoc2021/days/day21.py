"""Day 21: Dirac Dice."""

from __future__ import annotations

from collections import Counter
from functools import lru_cache
from itertools import cycle, product
from typing import Tuple

from ..config import DEFAULT_PART
from ..errors import ParseError
from ..parsing import lines, match_line
from . import check_part

TITLE = "Day 21: Dirac Dice"
REPORT = {
    1: "The losing score multiplied by the die rolls is {}.",
    2: "The winning player wins in {} universes.",
}

BOARD_SIZE = 10
PRACTICE_GOAL = 1000
DIRAC_GOAL = 21

# How many of the 27 quantum universes produce each three-roll total.
DIRAC_ROLLS = Counter(sum(rolls) for rolls in product((1, 2, 3), repeat=3))


def parse(text: str) -> Tuple[int, int]:
    rows = lines(text)
    if len(rows) != 2:
        raise ParseError(f"Expected two players, got {len(rows)} lines")
    starts = []
    for player, line in enumerate(rows, 1):
        m = match_line(rf"Player {player} starting position: (\d+)", line, "starting position")
        position = int(m.group(1))
        if not 1 <= position <= BOARD_SIZE:
            raise ParseError(f"Starting position {position} is not on the board")
        starts.append(position)
    return starts[0], starts[1]


def move(position: int, steps: int) -> int:
    return (position + steps - 1) % BOARD_SIZE + 1


def part_one(starts: Tuple[int, int]) -> int:
    """Play with the deterministic 100-sided die."""
    positions = list(starts)
    scores = [0, 0]
    die = cycle(range(1, 101))
    rolls = 0
    player = 0
    while True:
        positions[player] = move(positions[player], next(die) + next(die) + next(die))
        rolls += 3
        scores[player] += positions[player]
        if scores[player] >= PRACTICE_GOAL:
            return scores[1 - player] * rolls
        player = 1 - player


@lru_cache(maxsize=None)
def _wins(position: int, score: int, other_position: int, other_score: int) -> Tuple[int, int]:
    """Universes in which the player to move, and the other player, win."""
    wins, losses = 0, 0
    for total, universes in DIRAC_ROLLS.items():
        new_position = move(position, total)
        new_score = score + new_position
        if new_score >= DIRAC_GOAL:
            wins += universes
        else:
            other_wins, own_wins = _wins(other_position, other_score, new_position, new_score)
            wins += own_wins * universes
            losses += other_wins * universes
    return wins, losses


def part_two(starts: Tuple[int, int]) -> int:
    return max(_wins(starts[0], 0, starts[1], 0))


def solve(text: str, part: int = DEFAULT_PART) -> int:
    check_part(part, REPORT)
    starts = parse(text)
    return part_one(starts) if part == 1 else part_two(starts)
