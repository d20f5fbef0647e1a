"""Day 4: Giant Squid."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Tuple

import numpy as np

from ..config import DEFAULT_PART
from ..errors import ParseError
from ..grid import Array, to_array
from ..parsing import blocks, parse_int
from . import check_part

logger = logging.getLogger(__name__)

TITLE = "Day 4: Giant Squid"
REPORT = {
    1: "The winning bingo board has a final score of {}.",
    2: "The last bingo board to win has a final score of {}.",
}

BOARD_SIZE = 5


@dataclass
class Bingo:
    draws: List[int]
    boards: List[Array]


def parse(text: str) -> Bingo:
    groups = blocks(text)
    if len(groups) < 2 or len(groups[0]) != 1:
        raise ParseError("Expected a line of draws followed by boards separated by blank lines")
    draws = [parse_int(token, "draw") for token in groups[0][0].split(",")]
    boards = []
    for group in groups[1:]:
        rows = [[parse_int(token, "board number") for token in row.split()] for row in group]
        board = to_array(rows)
        if board.shape != (BOARD_SIZE, BOARD_SIZE):
            raise ParseError(f"Bingo board has shape {board.shape}, expected 5x5")
        boards.append(board)
    logger.debug(f"Parsed {len(draws)} draws and {len(boards)} boards")
    return Bingo(draws, boards)


def play(bingo: Bingo) -> Iterator[Tuple[int, int]]:
    """Yield ``(board index, score)`` for every board in the order they win."""
    marked = [np.zeros_like(board, dtype=bool) for board in bingo.boards]
    won = set()
    for draw in bingo.draws:
        for idx, board in enumerate(bingo.boards):
            if idx in won:
                continue
            marked[idx] |= board == draw
            if marked[idx].all(axis=0).any() or marked[idx].all(axis=1).any():
                won.add(idx)
                yield idx, int(board[~marked[idx]].sum()) * draw


def part_one(bingo: Bingo) -> int:
    for _, score in play(bingo):
        return score
    raise ParseError("No bingo board ever wins")


def part_two(bingo: Bingo) -> int:
    scores = [score for _, score in play(bingo)]
    if not scores:
        raise ParseError("No bingo board ever wins")
    return scores[-1]


def solve(text: str, part: int = DEFAULT_PART) -> int:
    check_part(part, REPORT)
    bingo = parse(text)
    return part_one(bingo) if part == 1 else part_two(bingo)
